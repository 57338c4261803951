import os
from dataclasses import dataclass

from dotenv import load_dotenv

# Load the appropriate .env file on module import
env = os.environ.get("INSTRUMENTARIUM_ENV", "development").lower()
env_file = f".env.{env}"
if os.path.exists(env_file):
    load_dotenv(env_file)
else:
    # Fall back to the default .env file
    load_dotenv()


@dataclass
class Config:
    environment: str
    database_url: str
    api_root: str
    api_url: str
    api_timeout: float
    log_level: str

    @classmethod
    def from_env(cls) -> "Config":
        return cls(
            environment=env,
            database_url=os.environ.get(
                "DATABASE_URL",
                "postgresql://localhost:5432/instrumentarium"
                + ("_test" if env == "test" else ""),
            ),
            api_root="/" + os.environ.get("INSTRUMENTS_API_ROOT", "/instruments-api").strip("/"),
            api_url=os.environ.get(
                "INSTRUMENTS_API_URL", "http://localhost:5000/instruments-api"
            ).rstrip("/"),
            api_timeout=float(os.environ.get("INSTRUMENTS_API_TIMEOUT", "10")),
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        )


config = Config.from_env()
