"""Main entry point for the Glossary Builder API."""

import logging
import uvicorn
from src.glossary_api.config import get_settings


def main():
    """Run the glossary API server."""
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    
    print("Starting Glossary Builder API...")
    print(f"Server will run on http://{settings.api_host}:{settings.api_port}")
    print(f"API Documentation available at http://{settings.api_host}:{settings.api_port}/docs")
    
    uvicorn.run(
        "src.glossary_api.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=True,
        log_level=settings.log_level.lower()
    )


if __name__ == "__main__":
    main()
