"""Shared fixtures for the test-suite: sample sheet records and an in-memory dish API."""
import json

import httpx

from dishbank.domain.Catalog import build_dishes
from dishbank.events.Event_Bus import EventBus
from dishbank.infra.Dish_Repository import DishRepository
from dishbank.logic.planner import MealPlanner

API_URL = "https://sheets.test/exec"

SAMPLE_RECORDS = [
    {"title": "Spaghetti Bolognese", "ingredients": ["Spaghetti", "Beef", "Onion", "Tomato"], "category": "main"},
    {"title": "chicken curry", "ingredients": ["Chicken", "onion", "Rice"], "category": "main"},
    {"title": "Garden Salad", "ingredients": ["Lettuce", "Tomato"], "category": "side"},
    {"title": "Popcorn", "ingredients": ["Corn", "Salt"], "category": "snacks"},
    {"title": "Apple Pie", "ingredients": ["Apple", "Flour", "Butter"]},
]


class FakeSheet:
    """In-memory stand-in for the spreadsheet web app, served through httpx.MockTransport."""

    def __init__(self, records=None, fail=False, status_code=200):
        self.records = [dict(r) for r in (records if records is not None else SAMPLE_RECORDS)]
        self.fail = fail
        self.status_code = status_code
        self.requests = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail:
            raise httpx.ConnectError("connection refused", request=request)
        if request.method == "POST":
            self.records.append(json.loads(request.content))
            return httpx.Response(200, text="Saved")
        return httpx.Response(self.status_code, json=self.records)

    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    def repository(self) -> DishRepository:
        return DishRepository(API_URL, transport=self.transport())


def make_planner(sheet=None, preload=True):
    """A planner on its own event bus, optionally with SAMPLE_RECORDS already in the catalog."""
    sheet = sheet or FakeSheet()
    planner = MealPlanner(sheet.repository(), event_bus=EventBus())
    if preload:
        planner.catalog.replace(build_dishes(sheet.records))
    return planner


def dish_id(planner, title):
    for dish in planner.catalog.dishes:
        if dish.title == title:
            return dish.id
    raise KeyError(title)
