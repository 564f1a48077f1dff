import uvicorn

from app.api.server import create_app
from app.config.settings import Settings
from app.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level, settings.app_env)
    app = create_app(settings)
    Log.info(f"Starting API on {settings.api_host}:{settings.api_port} (env={settings.app_env})")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)


if __name__ == "__main__":
    main()
