import os


# The gateway reads its configuration at import time. Provide test-only
# defaults so local/CI runs don't need real secrets or a .env file.
os.environ.setdefault("SUPABASE_JWT_SECRET", "test-secret-0123456789abcdef0123456789abcdef")
os.environ.setdefault("ADMIN_EMAIL", "admin@example.com")
os.environ.setdefault("GEMINI_API_KEY", "test-gemini-key")
os.environ.setdefault("CLIENT_ORIGIN", "http://localhost:5176,https://admin.example.com")
