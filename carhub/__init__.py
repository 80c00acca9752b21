from flask import Flask

from .config import ENV_PREFIX, Config, resolve_timezone
from .controllers.analytics import bp as analytics_bp
from .logging_config import setup_logging
from .models.store import Store


def create_app(config_overrides: dict | None = None):
    app = Flask(__name__)
    app.config.from_object(Config)
    app.config.from_prefixed_env(ENV_PREFIX)
    if config_overrides:
        app.config.update(config_overrides)

    setup_logging(app.config["LOG_LEVEL"])
    app.config["TZ"] = resolve_timezone(app.config["ANALYTICS_TIMEZONE"])
    # first path wins; a later mismatch is logged by Store.instance
    Store.instance(app.config["DATA_PATH"])
    app.register_blueprint(analytics_bp)

    return app
