import unittest
from dishbank.logic.ordering import locale_sorted


class TestLocaleOrdering(unittest.TestCase):

    def test_case_does_not_split_the_alphabet(self):
        self.assertEqual(locale_sorted(["banana", "Apple", "cherry"]), ["Apple", "banana", "cherry"])

    def test_accents_sort_next_to_base_letter(self):
        self.assertEqual(locale_sorted(["Zucchini", "Éclair", "Egg"]), ["Éclair", "Egg", "Zucchini"])

    def test_lower_case_before_upper_case_on_tie(self):
        self.assertEqual(locale_sorted(["Rice", "rice"]), ["rice", "Rice"])


if __name__ == '__main__':
    unittest.main()
