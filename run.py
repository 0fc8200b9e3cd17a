"""
Entry point for the Meeting Join Bot API.
"""

import sys
import uvicorn

from app.core.config import Settings
from app.main import create_app


def run():
    """Run the Meeting Join Bot API server."""
    settings = Settings()

    print("\n" + "=" * 60)
    print("MEETING JOIN BOT")
    print("=" * 60)
    print(f"🚀 Bot server listening on {settings.host}:{settings.port}")
    print(f"📚 API Docs: http://{settings.host}:{settings.port}/api/docs")
    print("=" * 60 + "\n")

    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        print("\n👋 Goodbye!")
    except Exception as e:
        print(f"\n❌ Fatal error: {e}")
        sys.exit(1)
