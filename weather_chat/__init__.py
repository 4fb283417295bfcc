"""Weather chat application package."""
import logging
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from weather_chat.controllers import ChatController, ConfigController, KnowledgeController
from weather_chat.errors import INVALID_MESSAGES_ERROR
from weather_chat.router import create_router
from weather_chat.services import (
    ChatOrchestrationService,
    ClassificationService,
    ConfigService,
    KnowledgeService,
    LLMService,
    PromptService,
)
from weather_chat.utils.colored_logger import setup_colored_logging

__version__ = "1.0.0"

# Load environment variables
load_dotenv()

# Configure colored logging
setup_colored_logging(level=logging.INFO)
logger = logging.getLogger(__name__)


def create_app(config_path: Optional[str] = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        config_path: Optional path to config file

    Returns:
        Configured FastAPI application
    """
    # Initialize services
    logger.info("Initializing services...")

    config_service = ConfigService(config_path)
    setup_colored_logging(level=config_service.get_log_level())

    knowledge_service = KnowledgeService()
    classification_service = ClassificationService()
    prompt_service = PromptService()
    llm_service = LLMService(development=config_service.is_development())

    chat_orchestration_service = ChatOrchestrationService(
        knowledge_service=knowledge_service,
        classification_service=classification_service,
        prompt_service=prompt_service,
        llm_service=llm_service,
        config_service=config_service
    )

    # Initialize controllers
    logger.info("Initializing controllers...")

    chat_controller = ChatController(chat_orchestration_service=chat_orchestration_service)
    config_controller = ConfigController(
        config_service=config_service,
        knowledge_service=knowledge_service
    )
    knowledge_controller = KnowledgeController(knowledge_service=knowledge_service)

    # Create FastAPI app
    app = FastAPI(
        title="Weather Chatbot API",
        description="API for weather-specific chatbot that provides weather information for cities worldwide",
        version=__version__
    )

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        logger.warning(f"Invalid request body for {request.url.path}: {exc.errors()}")
        return JSONResponse(status_code=400, content={"error": INVALID_MESSAGES_ERROR})

    # Create and include router
    router = create_router(chat_controller, config_controller, knowledge_controller)
    app.include_router(router)

    app.state.config_service = config_service
    app.state.llm_service = llm_service

    logger.info("Application initialized successfully")
    logger.info(f"Default model: {config_service.get_default_model()}")
    logger.info(f"Knowledge base cities: {len(knowledge_service.list_cities())}")

    return app
