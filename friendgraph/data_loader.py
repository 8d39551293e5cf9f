import csv

from friendgraph.constants import (
    ID_COLUMN, FRIENDS_COLUMN, STRIP_CHARS, QUOTE_CHAR, FRIEND_SEPARATOR, FIELD_SIZE_LIMIT,
)
from friendgraph.graph_builder import build_graph


class DataFileError(ValueError):
    """The file could not be read as a friends csv at all (bad encoding, broken csv)."""

    def __init__(self, row_number, reason):
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"row {row_number}: {reason}")


class MalformedRowError(DataFileError):
    """A row that does not have the id or friend list column, or has a blank id."""

    def __init__(self, row_number, row, column, reason=None):
        self.row = row
        self.column = column
        if reason is None:
            reason = f"missing column {column!r} (row has {len(row)} fields)"
        super().__init__(row_number, reason)


def clean_friend_list(text: str) -> list:

    # ["12","47","93"] -> ['12', '47', '93']
    # an empty field still gives one '' token, the graph builder decides what to do with it

    cleaned = text.strip().strip(STRIP_CHARS).replace(QUOTE_CHAR, '')
    return [token.strip() for token in cleaned.split(FRIEND_SEPARATOR)]


def parse_record(row, row_number, id_column=ID_COLUMN, friends_column=FRIENDS_COLUMN):

    # negative positions count from the end, same as python indexing
    for column in (id_column, friends_column):
        if not -len(row) <= column < len(row):
            raise MalformedRowError(row_number, row, column)

    person_id = row[id_column].strip()
    friends = clean_friend_list(row[friends_column])
    return person_id, friends


class FriendListLoader:

    def __init__(self, filepath: str, id_column=ID_COLUMN, friends_column=FRIENDS_COLUMN,
                 keep_empty: bool = False):

        self.filepath = filepath
        self.id_column = id_column
        self.friends_column = friends_column
        self.keep_empty = keep_empty

        self.header = []
        self.records = []
        self.people = set()

    def _resolve_column(self, column):

        # ints are positions, strings are header names

        if isinstance(column, int):
            return column

        names = [name.strip() for name in self.header]
        if column not in names:
            raise MalformedRowError(1, self.header, column)
        return names.index(column)

    def load(self):

        records = []
        people = set()

        # a friends field is a whole serialized list, it blows past csv's 128k default
        old_limit = csv.field_size_limit(FIELD_SIZE_LIMIT)

        try:
            with open(self.filepath, 'r', newline='', encoding='utf-8') as f:

                # rows can have different lengths, csv.reader does not care
                reader = csv.reader(f)
                try:
                    self._read_rows(reader, records, people)
                except (csv.Error, UnicodeDecodeError) as e:
                    # line_num is the physical line the reader got stuck on
                    raise DataFileError(max(reader.line_num, 1), str(e)) from e
        finally:
            csv.field_size_limit(old_limit)

        # only publish once every row parsed
        self.records = records
        self.people = people
        return self.records

    def _read_rows(self, reader, records, people):

        header = next(reader, None)
        self.header = header or []
        if header is None:
            return

        id_column = self._resolve_column(self.id_column)
        friends_column = self._resolve_column(self.friends_column)

        # row numbers count the header as row 1
        for row_number, row in enumerate(reader, start=2):
            if not row:
                continue

            person_id, friends = parse_record(row, row_number, id_column, friends_column)

            # keep_empty=False means no '' person anywhere, a blank id is a broken row
            if not person_id and not self.keep_empty:
                raise MalformedRowError(row_number, row, id_column,
                                        reason=f"blank id in column {id_column!r}")
            if not self.keep_empty:
                friends = [friend for friend in friends if friend]

            records.append((person_id, friends))
            people.add(person_id)
            people.update(friends)

    def build_graph(self, dedupe: bool = False) -> dict:
        return build_graph(self.records, keep_empty=self.keep_empty, dedupe=dedupe)


def read_data(filename: str, **kwargs) -> dict:

    # load + build in one go

    dedupe = kwargs.pop('dedupe', False)
    loader = FriendListLoader(filename, **kwargs)
    loader.load()
    return loader.build_graph(dedupe=dedupe)
