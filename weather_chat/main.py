"""Main entry point for the application."""
import logging

from weather_chat import create_app

logger = logging.getLogger(__name__)


# Create the FastAPI app instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    config_service = app.state.config_service
    port = config_service.get_port()

    logger.info("=" * 50)
    logger.info(f"🚀 Server is running on http://localhost:{port}")
    logger.info(f"📚 API docs available at http://localhost:{port}/docs")
    logger.info("=" * 50)

    uvicorn.run(app, host=config_service.get_host(), port=port)
