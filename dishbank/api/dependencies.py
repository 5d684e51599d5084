from fastapi import Request

from dishbank.events.web_observers import AlertFeed
from dishbank.logic.planner import MealPlanner


def get_planner(request: Request) -> MealPlanner:
    """The planner owned by the running app (tests swap app.state.planner)."""
    return request.app.state.planner


def get_alerts(request: Request) -> AlertFeed:
    return request.app.state.alerts
