from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://taskboard:taskboard@db:5432/taskboard")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    HOST = getenv("HOST", "0.0.0.0")
    PORT = int(getenv("PORT", "8000"))

    # passerelle SMS (vide = les notifications sont seulement loggées)
    SMS_GATEWAY_URL = getenv("SMS_GATEWAY_URL", "")
    SMS_GATEWAY_TOKEN = getenv("SMS_GATEWAY_TOKEN", "")
    SMS_FROM = getenv("SMS_FROM", "")
    SMS_TO = getenv("SMS_TO", "")
    SMS_TIMEOUT = int(getenv("SMS_TIMEOUT", "10"))  #en secondes

settings = Settings()
