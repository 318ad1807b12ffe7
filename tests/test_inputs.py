import unittest

from iris_client.inputs import InputController, parse_measurement
from iris_client.types import DEFAULT_FEATURES, FEATURE_NAMES, FeatureVector, UnknownFieldError


class InputControllerTests(unittest.TestCase):
    def test_starts_with_default_measurements(self) -> None:
        controller = InputController()
        self.assertEqual(controller.vector.as_dict(), DEFAULT_FEATURES)
        self.assertTrue(controller.vector.is_complete())

    def test_editing_one_field_leaves_others_unchanged(self) -> None:
        for name in FEATURE_NAMES:
            with self.subTest(field=name):
                controller = InputController()
                before = controller.vector.as_dict()

                updated = controller.on_field_change(name, "2.5")

                self.assertEqual(updated.get(name), 2.5)
                for other in FEATURE_NAMES:
                    if other != name:
                        self.assertEqual(updated.get(other), before[other])

    def test_empty_text_marks_field_unset_not_zero(self) -> None:
        controller = InputController()

        updated = controller.on_field_change("petal_width", "")

        self.assertIsNone(updated.petal_width)
        self.assertEqual(updated.missing_fields(), ["petal_width"])
        self.assertEqual(controller.display_value("petal_width"), "")

    def test_zero_is_a_committed_value(self) -> None:
        controller = InputController()
        updated = controller.on_field_change("sepal_width", "0")
        self.assertEqual(updated.sepal_width, 0.0)
        self.assertTrue(updated.is_complete())

    def test_unparseable_text_is_kept_as_draft_and_field_unset(self) -> None:
        controller = InputController()

        updated = controller.on_field_change("sepal_length", "5.1.2")

        self.assertIsNone(updated.sepal_length)
        self.assertEqual(controller.display_value("sepal_length"), "5.1.2")
        self.assertEqual(controller.drafts, {"sepal_length": "5.1.2"})

    def test_non_finite_text_is_rejected_at_the_edit(self) -> None:
        controller = InputController()
        for text in ("nan", "inf", "-Infinity"):
            with self.subTest(text=text):
                updated = controller.on_field_change("petal_length", text)
                self.assertIsNone(updated.petal_length)

    def test_valid_edit_clears_previous_draft(self) -> None:
        controller = InputController()
        controller.on_field_change("sepal_length", "abc")

        controller.on_field_change("sepal_length", "4.9")

        self.assertEqual(controller.vector.sepal_length, 4.9)
        self.assertEqual(controller.drafts, {})
        self.assertEqual(controller.display_value("sepal_length"), "4.9")

    def test_unknown_field_raises(self) -> None:
        controller = InputController()
        with self.assertRaises(UnknownFieldError):
            controller.on_field_change("stem_length", "1.0")
        self.assertEqual(controller.vector, FeatureVector())

    def test_reset_restores_defaults(self) -> None:
        controller = InputController()
        controller.on_field_change("petal_width", "oops")
        controller.reset()
        self.assertEqual(controller.vector, FeatureVector())
        self.assertEqual(controller.drafts, {})


def test_parse_measurement_accepts_surrounding_whitespace() -> None:
    assert parse_measurement(" 3.5 ") == 3.5
    assert parse_measurement("   ") is None
    assert parse_measurement("1e-1") == 0.1


if __name__ == "__main__":
    unittest.main()
