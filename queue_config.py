import os
import redis
from rq import Queue

# Redis para jobs en segundo plano (emails de notificación)
REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379/0")
redis_conn = redis.from_url(REDIS_URL)

# Cola única: la consume worker.py
queue = Queue(os.getenv("RQ_QUEUE", "edujuegos"), connection=redis_conn)
