from flask import Blueprint, render_template

bp = Blueprint("home", __name__)

LOGO = {
    "src": "/project-foam.png",
    "alt": "Project Foam placeholder logo",
    "width": 1080,
    "height": 1080,
}


@bp.get("/")
def home():
    return render_template("pages/home.html", logo=LOGO)
