import os

from dotenv import load_dotenv

load_dotenv()


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")

    # Remote product source
    PRODUCTS_API_URL = os.getenv("PRODUCTS_API_URL", "https://fakestoreapi.com/products")
    PRODUCTS_API_TIMEOUT = float(os.getenv("PRODUCTS_API_TIMEOUT", "10"))

    # Shown after every price on the catalog page
    CURRENCY_LABEL = os.getenv("CURRENCY_LABEL", "dh")

    # Comma-separated list
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
    APP_PORT = int(os.getenv("APP_PORT", "8080"))
