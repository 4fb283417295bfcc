#!/usr/bin/env python3
"""Simple script to run the application."""
import uvicorn

from weather_chat.services import ConfigService

if __name__ == "__main__":
    config_service = ConfigService()
    port = config_service.get_port()

    print("=" * 60)
    print("Starting Weather Chatbot API")
    print("=" * 60)
    print(f"\nServer will start at: http://localhost:{port}")
    print(f"API docs available at: http://localhost:{port}/docs")
    print("=" * 60)
    print()

    uvicorn.run(
        "weather_chat.main:app",
        host=config_service.get_host(),
        port=port,
        reload=config_service.is_development(),
        log_level="info"
    )
