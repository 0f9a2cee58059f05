#!/usr/bin/env python
"""
ARKY Backend API Launcher
Starts the FastAPI app under Uvicorn on the configured PORT.
"""
import platform
import sys
from datetime import datetime, timezone
from pathlib import Path

import uvicorn

from arky_api.core.config import get_settings
from arky_api.core.logging import setup_logging


# Colors for terminal output
class Colors:
    GREEN = '\033[92m'
    YELLOW = '\033[93m'
    CYAN = '\033[96m'
    END = '\033[0m'
    BOLD = '\033[1m'


def print_header(settings):
    print(f"\n{Colors.CYAN}{Colors.BOLD}")
    print("=" * 40)
    print("🚀 BACKEND API SERVER STARTING")
    print("=" * 40)
    print(f"{Colors.END}")
    print(f"Python version: {platform.python_version()}")
    print(f"Environment: {settings.environment}")
    print(f"🔧 Server will listen on port: {settings.port}")


def check_env_file():
    """Report which dotenv files were found"""
    found = [name for name in (".env", ".env.local") if Path(name).exists()]
    if not found:
        print(f"{Colors.YELLOW}⚠️  No .env or .env.local file found, using process environment{Colors.END}")
        return False
    print(f"{Colors.GREEN}✓ Loaded {', '.join(found)}{Colors.END}")
    return True


def main():
    settings = get_settings()
    setup_logging(settings.log_level)

    print_header(settings)
    check_env_file()

    print(f"\n{Colors.GREEN}⏰ Started at: {datetime.now(timezone.utc).isoformat()}{Colors.END}\n")
    try:
        uvicorn.run(
            "arky_api.main:app",
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        print(f"\n{Colors.YELLOW}Shutting down...{Colors.END}")
        sys.exit(0)


if __name__ == "__main__":
    main()
