# api/index.py
# Serverless entry point: the platform imports `app` and serves it, no app.run() here.
from app import create_app
from config.settings import Config

app = create_app(Config)
