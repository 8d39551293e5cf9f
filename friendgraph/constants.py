# NOTE: MODIFY TS ONLY WHEN U WANNA CHANGE THE OVERALL PARAMETERS OF THE DATA.

# file the driver reads when no path is given
DEFAULT_DATA_PATH = 'data.csv'

# schema of the friends dataset
# column 0 is the person id, column 9 (the last one) is the friend list
# both can be swapped for header names when loading, e.g. id_column='id'

ID_COLUMN = 0
FRIENDS_COLUMN = 9

# the friend list looks like a serialized list: ["12","47","93"]

STRIP_CHARS = '[]"'
QUOTE_CHAR = '"'
FRIEND_SEPARATOR = ','

# how the driver picks the bfs source when none is given
# first = first person in the file, max_degree = best connected person

SOURCE_STRATEGIES = ('first', 'max_degree')
DEFAULT_SOURCE_STRATEGY = 'first'

# second order reach = people exactly this many hops away
DISTANCE_2 = 2

# csv field size cap while loading, the friends column can hold thousands of ids
FIELD_SIZE_LIMIT = 2**31 - 1

# degree at or above this gets listed by name in the summary
HIGH_DEGREE_THRESHOLD = 30
