import os
import yaml
from pathlib import Path
from dotenv import load_dotenv

class Config:
    def __init__(self):
        # Load appropriate .env file based on environment
        self.env = os.getenv("BRAINSTORMAI_ENV", "dev")
        self._load_env_file()

        self.personas_file_name = os.getenv("PERSONAS_FILE", "personas.yaml")

        # Project paths
        self.project_root = Path(__file__).parent.parent.parent
        self.personas_file = self.project_root / self.personas_file_name

        # Google AI settings
        self.google_ai_api_key = os.getenv("GOOGLE_AI_API_KEY") or os.getenv("GEMINI_API_KEY")
        self.google_ai_model = os.getenv("GOOGLE_AI_MODEL", "gemini-2.0-flash")

        # Google OAuth settings
        self.google_client_id = os.getenv("GOOGLE_CLIENT_ID")
        self.google_client_secret = os.getenv("GOOGLE_CLIENT_SECRET")
        self.google_redirect_uri = os.getenv("GOOGLE_REDIRECT_URI", "http://localhost:5000/oauth2callback")

        # Chat settings
        self.max_retries = int(os.getenv("MAX_RETRIES", 3))
        self.retry_delay_seconds = float(os.getenv("RETRY_DELAY_SECONDS", 1.0))
        self.default_timezone = os.getenv("DEFAULT_TIMEZONE", "UTC")
        self.default_persona = os.getenv("DEFAULT_PERSONA", "Ada")
        self.default_user_id = os.getenv("DEFAULT_USER_ID", "demoUser123")

        # Token store settings
        self.token_store = os.getenv("TOKEN_STORE", "memory").lower()

        # MongoDB settings
        self.mongo_uri = os.getenv("MONGO_URI")
        self.mongo_db_name = os.getenv("MONGO_DB_NAME", "brainstormai")

        # Server settings
        self.app_host = os.getenv("APP_HOST", "0.0.0.0")
        self.app_port = int(os.getenv("APP_PORT", 5000))

        # Logging settings
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.log_format = os.getenv("LOG_FORMAT", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")

        # Load personas from YAML
        self.personas = self._load_personas()

    def _load_env_file(self):
        """Load the appropriate .env file based on the environment."""
        env_file = ".env"

        # Check for environment-specific .env file
        if self.env != "dev":
            env_specific_file = f".env.{self.env}"
            if Path(env_specific_file).exists():
                env_file = env_specific_file
                print(f"Loading environment from {env_file}")
            else:
                print(f"Warning: {env_specific_file} not found, falling back to .env")

        # Load the environment file
        load_dotenv(env_file)

    def _load_personas(self):
        """Load and parse personas from YAML file."""
        if not self.personas_file.exists():
            return {}

        with open(self.personas_file, 'r') as file:
            personas_config = yaml.safe_load(file) or {}
            return {
                persona['name']: persona.get('description', '')
                for persona in personas_config.get('personas', [])
                if persona.get('enabled', True)
            }

# Create a global config instance
config = Config()
