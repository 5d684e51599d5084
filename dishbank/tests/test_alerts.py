import unittest
from dishbank.events.Event_Bus import (
    EventBus, CATALOG_LOAD_FAILED, DISH_REJECTED, DISH_SAVED, MENU_CHANGED,
)
from dishbank.events.web_observers import AlertFeed


class TestAlertFeed(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.feed = AlertFeed(max_events=3).attach(self.bus)

    def test_records_failure_events_with_cursor(self):
        self.bus.publish(CATALOG_LOAD_FAILED, {"error": "Dish API answered 500"})
        self.bus.publish(MENU_CHANGED, {"count": 1})
        self.bus.publish(DISH_REJECTED, {"title": "", "message": "Please enter a dish title."})
        data = self.feed.get_events()
        self.assertEqual([e['type'] for e in data['events']], [CATALOG_LOAD_FAILED, DISH_REJECTED])
        self.assertEqual(data['events'][0]['level'], 'error')
        self.assertEqual(data['events'][0]['error'], "Dish API answered 500")
        self.assertEqual(data['events'][1]['message'], "Please enter a dish title.")
        self.assertEqual(data['next_cursor'], 2)
        self.assertEqual(self.feed.get_events(since=1)['events'][0]['id'], 2)
        self.assertEqual(self.feed.get_events(since=2), {'events': [], 'next_cursor': 2})

    def test_attach_is_idempotent(self):
        self.feed.attach(self.bus)
        self.bus.publish(DISH_SAVED, {"title": "Tacos"})
        self.assertEqual(len(self.feed.get_events()['events']), 1)

    def test_buffer_is_capped(self):
        for _ in range(5):
            self.bus.publish(DISH_SAVED, {"title": "Tacos"})
        events = self.feed.get_events()['events']
        self.assertEqual([e['id'] for e in events], [3, 4, 5])

    def test_empty_feed(self):
        self.assertEqual(self.feed.get_events(), {'events': [], 'next_cursor': 0})

    def test_failing_subscriber_does_not_stop_others(self):
        def broken(name, payload):
            raise RuntimeError("boom")
        bus = EventBus()
        bus.subscribe(DISH_SAVED, broken)
        feed = AlertFeed().attach(bus)
        bus.publish(DISH_SAVED, {"title": "Tacos"})
        self.assertEqual(len(feed.get_events()['events']), 1)


class TestEventBus(unittest.TestCase):

    def test_subscribe_works_as_decorator_for_several_events(self):
        bus = EventBus()
        seen = []

        @bus.subscribe((DISH_SAVED, MENU_CHANGED))
        def listener(name, payload):
            seen.append(name)

        self.assertTrue(callable(listener))
        bus.publish(MENU_CHANGED, {"count": 0, "servings": 0})
        bus.publish(DISH_SAVED, {"title": "Tacos"})
        self.assertEqual(seen, [MENU_CHANGED, DISH_SAVED])

    def test_publish_counts_deliveries(self):
        bus = EventBus()
        listener = bus.subscribe(DISH_SAVED, lambda name, payload: None)
        bus.subscribe(DISH_SAVED, listener)
        bus.subscribe(DISH_SAVED, lambda name, payload: 1 / 0)
        self.assertEqual(bus.publish(DISH_SAVED, {"title": "Tacos"}), 1)
        self.assertEqual(bus.publish(CATALOG_LOAD_FAILED), 0)


if __name__ == '__main__':
    unittest.main()
