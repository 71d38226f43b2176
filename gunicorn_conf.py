import os

bind = f"0.0.0.0:{os.getenv('PORT', '8080')}"
worker_class = "uvicorn.workers.UvicornWorker"

# The event list lives in process memory and is mirrored to one store slot,
# so more than one worker would serve diverging lists.
workers = 1
timeout = 300             # the model call has no client-side timeout
graceful_timeout = 30
keepalive = 75

accesslog = "-"
errorlog = "-"
loglevel = os.getenv("LOG_LEVEL", "info").lower()

wsgi_app = "server:app"
