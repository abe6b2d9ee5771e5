"""
auth — User authentication module.

Provides:
  • Bearer token signing & verification (HMAC-SHA256)
  • Password hashing (bcrypt, configurable work factor)
  • Register / Login API routes
  • ``get_current_username`` FastAPI dependency
"""
