# Local application imports
from nagrik.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
    UNDER_DEVELOPMENT: bool = True
    DATABASE_URL: str | None = "sqlite+aiosqlite:///./nagrik_seva.db"
    AUTO_CREATE_TABLES: bool = True
