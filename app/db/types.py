"""Column types."""
import json

from sqlalchemy import Text
from sqlalchemy.types import TypeDecorator


class IntList(TypeDecorator):
    """Ordered list of ints stored as a JSON array in a TEXT column.

    Order and duplicates are kept exactly as given. NULL and empty text read as [].
    """

    impl = Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return "[]"
        return json.dumps([int(v) for v in value])

    def process_result_value(self, value, dialect):
        if not value:
            return []
        return [int(v) for v in json.loads(value)]
