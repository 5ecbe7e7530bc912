import os
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
	# Accept a direct URL (supports either DATABASE_URL or database_url env vars)
	database_url: str | None = None

	# Individual parts with local defaults so dev can boot without .env
	DB_DRIVER: str = "postgresql"
	DB_HOST: str = "localhost"
	DB_USER: str = "postgres"
	DB_PASSWORD: str = "postgres"
	DB_NAME: str = "jobly"
	DB_PORT: int = 5432
	DB_ECHO: bool = False

	LOG_LEVEL: str = "INFO"
	ENABLE_REQUEST_LOGGING: bool = True

	# Prefer explicit database_url if provided; otherwise assemble from parts
	@property
	def DATABASE_URL(self) -> str:
		if self.database_url and self.database_url.strip() and self.database_url.strip() != "://:@:/":
			return self.database_url.strip()
		explicit_url = os.getenv("DATABASE_URL")
		if explicit_url and explicit_url.strip() and explicit_url.strip() != "://:@:/":
			return explicit_url.strip()
		return f"{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"

	model_config = SettingsConfigDict(
		env_file=".env",
		extra="ignore",
		case_sensitive=False,
	)

settings = Settings()
