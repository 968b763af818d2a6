import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Uygulama Ayarları
    app_name: str = os.getenv("LIBRARY_APP_NAME", "Library Management System")
    log_level: str = os.getenv("LIBRARY_LOG_LEVEL", "WARNING")

    # Rapor Ayarları
    report_file: str = os.getenv("LIBRARY_REPORT_FILE", "issued_books.txt")

    # Başlangıç kataloğu
    seed_catalog: bool = os.getenv("LIBRARY_SEED_CATALOG", "True").lower() in ("true", "1", "yes")


settings = Settings()
