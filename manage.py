#!/usr/bin/env python3
"""
=============================================================================
CANDIDATE INTAKE - DEVELOPER COMMANDER
=============================================================================
The single entry point for local developer operations.

Usage:
    python manage.py runserver   # Launch the API (uvicorn, --reload for dev)
    python manage.py init-db     # Create the database tables
    python manage.py doctor      # Configuration + dependency health check
"""

import sys
import asyncio
import argparse
from pathlib import Path

ROOT_DIR = Path(__file__).parent.resolve()

# Colors for terminal output
class Colors:
    HEADER = '\033[95m'
    CYAN = '\033[96m'
    GREEN = '\033[92m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'
    BOLD = '\033[1m'

def log(msg, color=Colors.ENDC):
    print(f"{color}{msg}{Colors.ENDC}")

# --- COMMANDS ---

def runserver(host: str, port: int, reload: bool):
    """Launches the API with uvicorn."""
    import uvicorn

    log(f"\n🚀 Launching API on http://{host}:{port}", Colors.HEADER)
    log(f"   🗺️  Docs: http://{host}:{port}/docs", Colors.BOLD)
    uvicorn.run(
        "app.main:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=True,
    )

async def _init_db() -> None:
    from app.shared.container import container
    from app.adapters.persistence.database import create_tables

    engine = container.db_engine()
    try:
        await create_tables(engine)
    finally:
        await engine.dispose()

def init_db():
    """Creates missing tables for the configured DATABASE_URL."""
    from app.shared.config import settings

    log("\n🗄️  Initializing Database", Colors.HEADER)
    log(f"   URL: {settings.DATABASE_URL}")
    try:
        asyncio.run(_init_db())
    except Exception as e:
        log(f"   ❌ Table creation failed: {e}", Colors.FAIL)
        sys.exit(1)
    log("   ✅ Tables ready.", Colors.GREEN)

async def check_components(repository, storage) -> dict:
    """Runs each health check; a raising check counts as down."""
    results = {}
    for name, component in (("database", repository), ("storage", storage)):
        try:
            results[name] = bool(await component.health_check())
        except Exception:
            results[name] = False
    return results

async def _doctor_checks() -> dict:
    from app.shared.container import container

    try:
        return await check_components(container.candidate_repository(), container.file_storage())
    finally:
        await container.db_engine().dispose()

def doctor() -> bool:
    """System Diagnostic Tool."""
    from app.shared.config import settings

    log("\n🩺 Running Doctor...", Colors.HEADER)

    # 1. Config summary (no secrets)
    log(f"   📂 Root: {ROOT_DIR}")
    log(f"   ⚙️  APP_ENV={settings.APP_ENV.value} LOG_FORMAT={settings.LOG_FORMAT}")
    log(f"   🗄️  DATABASE_URL={settings.DATABASE_URL}")
    log(f"   📦 STORAGE_BACKEND={settings.STORAGE_BACKEND.value}")
    if not (ROOT_DIR / ".env").exists():
        log("   ⚠️  No .env file found; using environment/defaults.", Colors.WARNING)

    # 2. Dependencies
    results = asyncio.run(_doctor_checks())
    for name, ok in results.items():
        if ok:
            log(f"   ✅ {name} reachable.", Colors.GREEN)
        else:
            log(f"   ❌ {name} unreachable.", Colors.FAIL)

    healthy = all(results.values())
    log("   ✅ Doctor complete." if healthy else "   ❌ Doctor found problems.",
        Colors.GREEN if healthy else Colors.FAIL)
    return healthy

# --- MAIN ---

def main(argv=None):
    parser = argparse.ArgumentParser(description="Candidate Intake Commander")
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Runserver
    run_parser = subparsers.add_parser("runserver", help="Launch the API")
    run_parser.add_argument("--host", default="127.0.0.1")
    run_parser.add_argument("--port", type=int, default=8000)
    run_parser.add_argument("--reload", action="store_true", help="Auto-reload on code changes")

    # Init DB
    subparsers.add_parser("init-db", help="Create database tables")

    # Doctor
    subparsers.add_parser("doctor", help="Run diagnostics")

    args = parser.parse_args(argv)

    # Default to help
    if not args.command:
        parser.print_help()
        sys.exit(0)

    if args.command == "runserver":
        runserver(args.host, args.port, args.reload)

    elif args.command == "init-db":
        init_db()

    elif args.command == "doctor":
        if not doctor():
            sys.exit(1)

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        log("\n🛑 Aborted by user.", Colors.WARNING)
