import os

# ✅ Environment
ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
IS_PRODUCTION = ENVIRONMENT == "production"

# ✅ Database
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./jobnest.db")
RUN_MIGRATIONS = os.getenv("RUN_MIGRATIONS", "0") == "1"

# ✅ Security
SECRET_KEY = os.getenv("SECRET_KEY", "change-me-in-production")
ALGORITHM = os.getenv("ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_DAYS = int(os.getenv("ACCESS_TOKEN_EXPIRE_DAYS", "7"))
BCRYPT_ROUNDS = 12

# ✅ Session cookie
AUTH_COOKIE_NAME = "auth-token"
COOKIE_SECURE = IS_PRODUCTION or os.getenv("COOKIE_SECURE", "0") == "1"

# ✅ Payments (Stripe PaymentIntent acts as the activation order)
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
PAYMENT_SIGNING_SECRET = os.getenv("PAYMENT_SIGNING_SECRET", "")
ACTIVATION_AMOUNT = 10000  # ₹100 in paise
ACTIVATION_CURRENCY = "INR"
REQUIRE_SEEKER_ACTIVATION = os.getenv("REQUIRE_SEEKER_ACTIVATION", "0") == "1"

# ✅ Resume storage
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")
UPLOAD_BASE_URL = os.getenv("UPLOAD_BASE_URL", "/uploads")
MAX_RESUME_BYTES = int(os.getenv("MAX_RESUME_BYTES", str(5 * 1024 * 1024)))

# ✅ Listing
JOBS_PAGE_SIZE = 10

# ✅ Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_DIR = os.getenv("LOG_DIR", "logs")

# ✅ CORS
CORS_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if origin.strip()
]
