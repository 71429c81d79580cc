#!/usr/bin/env python3
"""Launch the Property Reel HTTP service."""

import argparse

import uvicorn

from property_reel.config import settings
from property_reel.utils.logging_config import configure_logging


def main():
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Launch the Property Reel timeline service"
    )
    
    parser.add_argument(
        '--host',
        default=settings.host,
        help=f'Interface to bind (default: {settings.host})'
    )
    
    parser.add_argument(
        '--port',
        type=int,
        default=settings.port,
        help=f'Port to run the server on (default: {settings.port})'
    )
    
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )
    
    args = parser.parse_args()
    
    configure_logging("DEBUG" if args.debug or settings.debug else settings.log_level)
    
    print(f"🌐 Local URL: http://localhost:{args.port}")
    print("\nPress Ctrl+C to stop the server\n")
    
    uvicorn.run("property_reel.web.app:app", host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
