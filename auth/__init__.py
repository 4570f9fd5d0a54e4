"""
auth — User authentication module.

Provides:
  • JWT token creation & verification
  • Password hashing (bcrypt)
  • Register / Login / Logout API routes
  • ``get_current_user_id`` FastAPI dependency
"""
