import os
from decimal import Decimal
from dotenv import load_dotenv

# Загрузка .env
load_dotenv()

# База данных
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///mlm.db")

# Каталог товаров (HTTP)
PRODUCTS_API_URL = os.getenv("PRODUCTS_API_URL", "http://localhost:5000")

# Логирование
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# Удержания с комиссии по умолчанию (если в базе нет активной структуры)
DEFAULT_TDS_PERCENTAGE = Decimal(os.getenv("DEFAULT_TDS_PERCENTAGE", "0.05"))
DEFAULT_ADMIN_FEE_PERCENTAGE = Decimal(os.getenv("DEFAULT_ADMIN_FEE_PERCENTAGE", "0.02"))
DEFAULT_REPURCHASE_PERCENTAGE = Decimal(os.getenv("DEFAULT_REPURCHASE_PERCENTAGE", "0.03"))

# Уровневые комиссии: "уровень:ставка" через запятую
DEFAULT_LEVEL_COMMISSIONS = {
    int(level): Decimal(rate)
    for level, rate in (
        item.split(":") for item in os.getenv("DEFAULT_LEVEL_COMMISSIONS", "1:0.05,2:0.03,3:0.02").split(",")
        if ":" in item
    )
}

# Фиксированное время системы (ISO 8601), например для пересчета прошлого месяца
SYSTEM_TIME = os.getenv("SYSTEM_TIME")
