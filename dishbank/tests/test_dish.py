import unittest
from dishbank.domain.Dish import Dish


class TestDish(unittest.TestCase):

    def test_from_dict_keeps_fields(self):
        dish = Dish.from_dict({"title": " Omelette ", "ingredients": ["Eggs", " Cheese "], "category": "Side"}, 3)
        self.assertEqual(dish.id, "3")
        self.assertEqual(dish.title, "Omelette")
        self.assertEqual(dish.ingredients, ("Eggs", "Cheese"))
        self.assertEqual(dish.category, "side")

    def test_missing_category_defaults_to_main(self):
        dish = Dish.from_dict({"title": "Soup", "ingredients": ["Water"]}, 0)
        self.assertEqual(dish.category, "main")

    def test_unknown_category_defaults_to_main(self):
        dish = Dish.from_dict({"title": "Cake", "category": "dessert"}, 0)
        self.assertEqual(dish.category, "main")

    def test_malformed_ingredients_become_empty(self):
        for raw in (None, "Eggs, Milk", 42, {"a": 1}):
            dish = Dish.from_dict({"title": "Pancakes", "ingredients": raw}, 0)
            self.assertEqual(dish.ingredients, (), raw)
        dish = Dish.from_dict({"title": "Pancakes"}, 0)
        self.assertEqual(dish.ingredients, ())

    def test_non_string_and_blank_ingredients_dropped(self):
        dish = Dish.from_dict({"title": "Toast", "ingredients": ["Bread", "", "  ", 5, None, "Butter"]}, 0)
        self.assertEqual(dish.ingredients, ("Bread", "Butter"))

    def test_source_id_wins_over_position(self):
        dish = Dish.from_dict({"id": 17, "title": "Tacos"}, 2)
        self.assertEqual(dish.id, "17")

    def test_missing_title_rejected(self):
        with self.assertRaises(ValueError):
            Dish.from_dict({"ingredients": ["Salt"]}, 0)
        with self.assertRaises(ValueError):
            Dish.from_dict({"title": "   "}, 0)
        with self.assertRaises(ValueError):
            Dish.from_dict(["not", "a", "record"], 0)

    def test_dish_is_read_only(self):
        dish = Dish("1", "Rice", ["Rice"])
        with self.assertRaises(AttributeError):
            dish.title = "Fried rice"

    def test_to_dict(self):
        dish = Dish("1", "Rice", ["Rice", "Water"], "side")
        self.assertEqual(dish.to_dict(), {"id": "1", "title": "Rice", "ingredients": ["Rice", "Water"], "category": "side"})


if __name__ == '__main__':
    unittest.main()
