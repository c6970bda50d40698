"""Tests for parsing Claude responses into reply text and action lists."""

from shared.helpers import strip_markdown_fences
from shared.parsing import (
    GENERIC_ACTIONS,
    parse_text,
    parse_actions,
    parse_strict_json,
    parse_embedded_array,
    parse_action_lines
)


def test_parse_text_trims():
    assert parse_text('\n  Thanks for the feedback!  \n') == 'Thanks for the feedback!'


class TestStripMarkdownFences:

    def test_json_fence(self):
        assert strip_markdown_fences('```json\n["a", "b"]\n```') == '["a", "b"]'

    def test_bare_fence(self):
        assert strip_markdown_fences('```\n["a"]\n```') == '["a"]'

    def test_trailing_fence_only(self):
        assert strip_markdown_fences('["a"]\n```') == '["a"]'

    def test_no_fence_untouched(self):
        assert strip_markdown_fences('  plain text ') == 'plain text'


class TestStrictJson:

    def test_array_of_strings(self):
        assert parse_strict_json('["Fix the lift", "Hire more staff"]') == ['Fix the lift', 'Hire more staff']

    def test_truncates_to_three(self):
        text = '["one", "two", "three", "four", "five"]'
        assert parse_strict_json(text) == ['one', 'two', 'three']

    def test_empty_array_is_no_result(self):
        assert parse_strict_json('[]') is None

    def test_non_string_items_are_no_result(self):
        assert parse_strict_json('[1, 2, 3]') is None

    def test_object_is_no_result(self):
        assert parse_strict_json('{"actions": ["a"]}') is None

    def test_invalid_json_is_no_result(self):
        assert parse_strict_json('Here you go: ["a"]') is None


class TestEmbeddedArray:

    def test_array_inside_prose(self):
        text = 'Here are my recommendations: ["Improve delivery times", "Train support staff"] Hope this helps.'
        assert parse_embedded_array(text) == ['Improve delivery times', 'Train support staff']

    def test_multiline_array(self):
        text = 'Recommendations:\n[\n  "Improve delivery times",\n  "Train support staff"\n]'
        assert parse_embedded_array(text) == ['Improve delivery times', 'Train support staff']

    def test_no_brackets(self):
        assert parse_embedded_array('No array here') is None

    def test_broken_array(self):
        assert parse_embedded_array('Try [this, that]') is None

    def test_leading_array_followed_by_bracketed_prose(self):
        text = '["Refund the late order promptly", "Audit courier performance"]\n\nThese address [the delay].'
        assert parse_embedded_array(text) == ['Refund the late order promptly', 'Audit courier performance']

    def test_skips_arrays_that_are_not_strings(self):
        text = 'Scores [1, 2] led to: ["Retrain the night shift", "Fix the door"]'
        assert parse_embedded_array(text) == ['Retrain the night shift', 'Fix the door']


class TestActionLines:

    def test_strips_bullets_and_numbers(self):
        text = '- Improve the checkout flow\n• Train staff on greetings\n* Offer loyalty discounts'
        assert parse_action_lines(text) == [
            'Improve the checkout flow',
            'Train staff on greetings',
            'Offer loyalty discounts'
        ]

    def test_numbered_list(self):
        text = '1. Speed up table service\n2. Refresh the dessert menu'
        assert parse_action_lines(text) == ['Speed up table service', 'Refresh the dessert menu']

    def test_strips_wrapping_quotes(self):
        text = '"Improve packaging for fragile items",\n\'Call the customer back today\''
        assert parse_action_lines(text) == ['Improve packaging for fragile items', 'Call the customer back today']

    def test_keeps_unpaired_quotes(self):
        text = '- Improve "service" at the front desk\n- Greet every guest with a "welcome"'
        assert parse_action_lines(text) == [
            'Improve "service" at the front desk',
            'Greet every guest with a "welcome"'
        ]

    def test_drops_short_and_json_lines(self):
        text = '[\n- Fix it\n{"a": "b and more text"}\n- Replace the broken coffee machine\n]'
        assert parse_action_lines(text) == ['Replace the broken coffee machine']

    def test_takes_at_most_three(self):
        text = '\n'.join(f'- Recommendation number {n}' for n in range(1, 6))
        assert len(parse_action_lines(text)) == 3

    def test_nothing_usable(self):
        assert parse_action_lines('Yes.\nOk') is None


class TestParseActions:

    def test_plain_json(self):
        assert parse_actions('["Fix the lift", "Hire more staff"]') == ['Fix the lift', 'Hire more staff']

    def test_fenced_json(self):
        raw = '```json\n["Reduce wait times at peak hours", "Add more seating"]\n```'
        assert parse_actions(raw) == ['Reduce wait times at peak hours', 'Add more seating']

    def test_json_array_before_trailing_prose(self):
        raw = '["Refund the late order promptly", "Audit courier performance"]\n\nThese address [the delay].'
        assert parse_actions(raw) == ['Refund the late order promptly', 'Audit courier performance']

    def test_five_items_truncated(self):
        raw = '["a1", "a2", "a3", "a4", "a5"]'
        assert parse_actions(raw) == ['a1', 'a2', 'a3']

    def test_prose_with_bullets(self):
        raw = (
            'Based on this review:\n'
            '- Investigate the delayed delivery with the courier\n'
            '- Offer a partial refund for the late order\n'
        )
        assert parse_actions(raw) == [
            'Based on this review:',
            'Investigate the delayed delivery with the courier',
            'Offer a partial refund for the late order'
        ]

    def test_empty_array_falls_back_to_generic(self):
        assert parse_actions('[]') == list(GENERIC_ACTIONS)

    def test_unusable_text_falls_back_to_generic(self):
        assert parse_actions('OK.') == list(GENERIC_ACTIONS)
