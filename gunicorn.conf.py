"""
Gunicorn configuration for production deployment.

    gunicorn main:app -c gunicorn.conf.py
"""
from pathlib import Path

from framework.config import settings

LOG_DIR = Path(settings.LOG_DIR)
LOG_DIR.mkdir(parents=True, exist_ok=True)

bind = f"{settings.SERVER_HOST}:{settings.SERVER_PORT}"
workers = settings.GUNICORN_WORKERS
worker_class = "uvicorn.workers.UvicornWorker"
max_requests = 1000
max_requests_jitter = 50
timeout = 60
graceful_timeout = 30
keepalive = 5

proc_name = (settings.GUNICORN_PROC_NAME or settings.APP_NAME.lower().replace(" ", "-"))[:32]

accesslog = str(LOG_DIR / "gunicorn_access.log")
errorlog = str(LOG_DIR / "gunicorn_error.log")
loglevel = settings.LOG_LEVEL.lower()

daemon = False
pidfile = str(LOG_DIR / "gunicorn.pid")
preload_app = True


def when_ready(server):
    server.log.info("%s is ready. Listening on %s", settings.APP_NAME, server.address)


def on_exit(server):
    server.log.info("%s is shutting down.", settings.APP_NAME)


def post_fork(server, worker):
    server.log.info("Worker spawned (pid: %s)", worker.pid)
