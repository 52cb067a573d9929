from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = ConfigDict(env_file=".env", extra="ignore")

    APP_NAME: str = "Aegis Intent Gate"
    ENV: str = "development"

    # Konfiguracja detekcji intencji
    AMBIGUITY_THRESHOLD: int = 50  # Próg niejednoznaczności (0-100+)
    SUPPORTED_LANGUAGES: list[str] = [
        "en",
        "ko",
        "ja",
    ]  # Języki skanowane przez matcher (kolejność ma znaczenie)

    # Konfiguracja wstrzykiwania kontekstu systemowego
    CONTEXT_MAX_TOKENS: int = 500  # Budżet tokenów dla kontekstu telemetrii
    CONTEXT_CHARS_PER_TOKEN: int = 4  # Przybliżona liczba znaków na token

    # Konfiguracja logowania
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = False  # Dodatkowy sink plikowy (rotacja 10 MB)
    LOG_DIR: str = "./logs"

    @property
    def context_max_chars(self) -> int:
        """Budżet kontekstu w znakach (tokeny * znaki/token)."""
        return self.CONTEXT_MAX_TOKENS * self.CONTEXT_CHARS_PER_TOKEN


SETTINGS = Settings()
