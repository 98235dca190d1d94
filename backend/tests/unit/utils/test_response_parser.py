"""
Unit Tests for the JSON response parser
"""
from campushub.utils.response_parser import JSONResponseParser


class TestExtract:
    """Test JSON extraction strategies"""

    def test_plain_json(self):
        assert JSONResponseParser.extract('{"questions": ["A?"]}') == {"questions": ["A?"]}

    def test_fenced_block(self):
        text = 'Sure!\n```json\n{"questions": ["A?", "B?"]}\n```\nGood luck.'

        assert JSONResponseParser.extract(text) == {"questions": ["A?", "B?"]}

    def test_unlabelled_fence(self):
        assert JSONResponseParser.extract('```\n{"a": 1}\n```') == {"a": 1}

    def test_outermost_braces(self):
        text = 'The result is {"questions": ["What is {x}?"]} as requested.'

        assert JSONResponseParser.extract(text) == {"questions": ["What is {x}?"]}

    def test_no_json(self):
        assert JSONResponseParser.extract("No questions today.") is None

    def test_empty(self):
        assert JSONResponseParser.extract("") is None
        assert JSONResponseParser.extract("   ") is None
