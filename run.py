#!/usr/bin/env python3
"""
Server startup script with command line overrides.
"""

import sys
import argparse

from phrase_router.config.settings import get_settings


def main():
    """Main startup function"""
    parser = argparse.ArgumentParser(description="Phrase Router Translation Server")
    parser.add_argument(
        "--host",
        default=None,
        help="Host to bind to (overrides config)"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind to (overrides config)"
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Number of worker processes (overrides config)"
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload (overrides config)"
    )
    parser.add_argument(
        "--check-provider",
        action="store_true",
        help="Validate the remote provider configuration and exit"
    )

    args = parser.parse_args()
    settings = get_settings()

    if args.check_provider:
        from phrase_router.services.remote_client import DeepSeekTranslationClient

        result = DeepSeekTranslationClient(settings.provider).validate_config()
        if result["is_valid"]:
            print("✓ Provider configuration is valid")
        else:
            print(f"✗ Provider configuration is invalid: {result['error']}")
            sys.exit(1)
        return

    # Apply command line overrides
    if args.host:
        settings.host = args.host
    if args.port:
        settings.port = args.port
    if args.workers:
        settings.workers = args.workers
    if args.reload:
        settings.reload = True

    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"   Environment: {settings.environment.value}")
    print(f"   Host: {settings.host}")
    print(f"   Port: {settings.port}")
    print(f"   Workers: {settings.workers}")
    print(f"   Log Level: {settings.log_level.value}")

    import uvicorn

    uvicorn.run(
        "phrase_router.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
        workers=settings.workers if not settings.reload else 1,
        log_level=settings.log_level.value.lower(),
        access_log=True,
    )


if __name__ == "__main__":
    main()
