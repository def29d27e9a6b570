import logging

from rq import Worker

from app import create_app
from queue_config import queue

app = create_app()
logger = logging.getLogger("mail")

if __name__ == "__main__":
    # Los jobs usan db.session y render_template: necesitan el app context
    with app.app_context():
        logger.info("Worker RQ escuchando la cola '%s'", queue.name)
        Worker([queue], connection=queue.connection).work()
