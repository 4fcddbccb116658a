# gunicorn.conf.py
import os
import logging
import sys
import multiprocessing

# Application factory; each worker loads the corpus once
wsgi_app = "app:create_app()"

# Configure logging to stdout
accesslog = '-'
errorlog = '-'
loglevel = 'info'

# Get PORT from environment or use default
port = os.getenv('PORT', '8080')
bind = f"0.0.0.0:{port}"

# Threads in a worker share one read-only index
cores = multiprocessing.cpu_count()
workers = min(cores + 1, 4)
threads = 4

# Log configuration on startup
def on_starting(server):
    logger = logging.getLogger('gunicorn.error')
    logger.setLevel(logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    logger.info(f"Starting gunicorn with {workers} workers on port {port}")

timeout = 30
keepalive = 5
worker_class = "gthread"

# Process naming
proc_name = "verse_index"
default_proc_name = "verse_index"

# Graceful server restart
graceful_timeout = 30
