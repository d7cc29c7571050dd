import unittest

from freqi import (
    EmptyOrMissingField,
    NoteRequest,
    RangeViolation,
    Result,
    TypeMismatch,
    compute_single_note,
)
from tests.helpers import capture_logger


def note(**kwargs):
    request = {"start_freq": 440, "num_semitones": 12}
    request.update(kwargs)
    return compute_single_note(request, verbose=False)


class SingleNoteTests(unittest.TestCase):
    def test_octave_up(self) -> None:
        result = note(interval=12)
        self.assertTrue(result.ok)
        self.assertEqual(result.value, 880)

    def test_octave_down(self) -> None:
        self.assertEqual(note(interval=-12).value, 220)

    def test_unison(self) -> None:
        self.assertEqual(note(interval=0).value, 440)

    def test_fifth(self) -> None:
        self.assertAlmostEqual(note(interval=7).value, 659.2551, places=3)

    def test_other_octave_divisions(self) -> None:
        self.assertEqual(note(interval=19, num_semitones=19).value, 880)
        self.assertAlmostEqual(note(interval=1, num_semitones=24).value, 452.8929, places=3)

    def test_upwards_scale_overrides_sign(self) -> None:
        # Downward uses the magnitude of the interval
        self.assertEqual(note(interval=12, upwards_scale=False).value, 220)
        self.assertEqual(note(interval=-12, upwards_scale=True).value, 220)
        self.assertEqual(note(interval=12, upwards_scale=True).value, 880)

    def test_accepts_note_request(self) -> None:
        result = compute_single_note(NoteRequest(interval=-24, start_freq=880, num_semitones=12))
        self.assertEqual(result.value, 220)

    def test_zero_semitones_rejected(self) -> None:
        result = note(interval=3, num_semitones=0)
        self.assertFalse(result.ok)
        self.assertIs(result.value, False)
        self.assertIsInstance(result.error, RangeViolation)
        self.assertEqual(result.error.field, "num_semitones")

    def test_negative_start_freq_rejected(self) -> None:
        result = note(interval=3, start_freq=-1)
        self.assertIsInstance(result.error, RangeViolation)
        self.assertEqual(result.error_kind, "range_violation")

    def test_type_mismatches(self) -> None:
        for bad in ({"interval": "3"}, {"interval": float("nan")}, {"interval": True},
                    {"interval": 3, "upwards_scale": "yes"}, {"interval": 3, "start_freq": "440"}):
            with self.subTest(bad=bad):
                result = note(**bad)
                self.assertIs(result.value, False)
                self.assertIsInstance(result.error, TypeMismatch)

    def test_missing_interval(self) -> None:
        result = compute_single_note({"start_freq": 440, "num_semitones": 12}, verbose=False)
        self.assertIsInstance(result.error, EmptyOrMissingField)

    def test_not_a_mapping(self) -> None:
        result = compute_single_note(12, verbose=False)
        self.assertIs(result.value, False)
        self.assertIsInstance(result.error, EmptyOrMissingField)

    def test_overflow_is_range_violation(self) -> None:
        result = note(interval=1_000_000)
        self.assertIsInstance(result.error, RangeViolation)

    def test_huge_integer_interval(self) -> None:
        for interval in (10**400, -(10**400)):
            with self.subTest(sign=interval > 0):
                result = note(interval=interval)
                self.assertIs(result.value, False)
                self.assertIsInstance(result.error, RangeViolation)
        self.assertIn("bit int", str(note(interval=10**400).error))

    def test_infinite_frequency_is_range_violation(self) -> None:
        self.assertIsInstance(note(interval=float("inf")).error, RangeViolation)
        self.assertIsInstance(note(interval=0, start_freq=float("inf")).error, RangeViolation)

    def test_unwrap(self) -> None:
        self.assertEqual(note(interval=12).unwrap(), 880)
        with self.assertRaises(RangeViolation):
            note(interval=1, num_semitones=0).unwrap()

    def test_unwrap_failure_without_error(self) -> None:
        with self.assertRaises(RuntimeError):
            Result(ok=False, value=False).unwrap()

    def test_failure_logged_to_injected_logger(self) -> None:
        logger, handler = capture_logger("tests.freqi.note")
        compute_single_note({"interval": "x", "start_freq": 440, "num_semitones": 12}, logger=logger)
        self.assertEqual(len(handler.messages), 1)
        self.assertIn("interval", handler.messages[0])

    def test_verbose_false_silences(self) -> None:
        logger, handler = capture_logger("tests.freqi.quiet")
        compute_single_note({"interval": "x", "start_freq": 440, "num_semitones": 12}, verbose=False, logger=logger)
        self.assertEqual(handler.messages, [])

    def test_default_logger(self) -> None:
        with self.assertLogs("freqi", level="ERROR"):
            compute_single_note({"interval": 1, "start_freq": 440, "num_semitones": 0})


if __name__ == "__main__":
    unittest.main()
