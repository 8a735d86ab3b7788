#!/usr/bin/env python3
"""
StackAdvisor — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --host 127.0.0.1 --port 8000 --tree data/tree.json
"""

import argparse
import logging
import os

import uvicorn


def main():
    parser = argparse.ArgumentParser(description='StackAdvisor API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')
    parser.add_argument('--tree', default=None, help='Decision tree JSON (default: bundled)')
    parser.add_argument('--log-level', default='INFO', help='Logging level')

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.tree:
        # Читається в APIConfig.from_env() під час імпорту додатку
        os.environ["TREE_PATH"] = args.tree

    logging.getLogger(__name__).info(
        "StackAdvisor API on %s:%d (reload=%s)", args.host, args.port, args.reload
    )

    # Сесії зберігаються в пам'яті процесу → з кількома workers
    # кожен worker матиме власний набір сесій
    uvicorn.run(
        "stack_advisor.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level=args.log_level.lower(),
    )


if __name__ == "__main__":
    main()
