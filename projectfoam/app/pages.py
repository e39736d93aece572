from flask import Flask

from projectfoam.modules.home.routes import bp as home_bp
from projectfoam.modules.shops.routes import bp as shops_bp


def register_page_blueprints(app: Flask) -> None:
    app.register_blueprint(home_bp)
    app.register_blueprint(shops_bp)

    # Health endpoint (for Docker/uptime checks)
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200
