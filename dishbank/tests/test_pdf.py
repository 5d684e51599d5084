import unittest
from dishbank.domain.Dish import Dish
from dishbank.domain.WeeklyMenu import WeeklyMenu
from dishbank.events.Event_Bus import EventBus
from dishbank.infra.pdf_utils import generate_pdf_for_menu


class TestMenuPdf(unittest.TestCase):

    def test_pdf_for_menu(self):
        menu = WeeklyMenu().set_event_bus(EventBus())
        menu.add_or_increment(Dish("0", "Mac & Cheese", ["Macaroni", "Cheese <aged>"]))
        pdf = generate_pdf_for_menu(menu.get_entries(), menu.extract_grocery_list())
        self.assertTrue(pdf.startswith(b"%PDF"))

    def test_pdf_for_empty_menu(self):
        pdf = generate_pdf_for_menu([], [])
        self.assertTrue(pdf.startswith(b"%PDF"))


if __name__ == '__main__':
    unittest.main()
