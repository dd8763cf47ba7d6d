# scripts/init_db.py
#  to run the script, run the following command:
#  python scripts/init_db.py [--drop]

"""
Database Initialisation Script
Creates the clinic booking tables on the configured DATABASE_URL
"""
import argparse
import asyncio
import logging.config
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from dotenv import load_dotenv

load_dotenv()

from config.appconfig import settings
from app.database.connection import Base, drop_db, engine, init_db

logging.config.dictConfig(settings.LOGGING_CONFIG)
logger = logging.getLogger("scripts.init_db")


async def main(drop: bool) -> None:
    try:
        if drop:
            logger.warning("Dropping existing tables first")
            await drop_db()
        await init_db()
        logger.info(f"📦 {len(Base.metadata.tables)} tables ready at {engine.url.render_as_string(hide_password=True)}")
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create the clinic booking schema.")
    parser.add_argument("--drop", action="store_true", help="drop all tables before creating them")
    args = parser.parse_args()

    print("\n" + "=" * 60)
    print(f"   {settings.APP_NAME.upper()} - DATABASE SETUP")
    print("=" * 60 + "\n")

    asyncio.run(main(args.drop))
