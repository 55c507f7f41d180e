"""Fixed-size single-occupancy cell storage."""

from core.errors import InvalidArgumentError, OutOfBoundsError, WorldNotInitializedError
from core.observer import get_logger


class Grid:
    """Width x height table of cells, each holding one occupant or None.

    Cells are stored column-major: ``rows()[x][y]``. The outer list has
    ``width`` entries, each of length ``height``.
    """

    __slots__ = ("_rows", "_log")

    def __init__(self):
        self._rows = None
        self._log = get_logger()

    @property
    def initialized(self):
        return self._rows is not None

    @property
    def width(self):
        return len(self._table())

    @property
    def height(self):
        rows = self._table()
        return len(rows[0]) if rows else 0

    @staticmethod
    def check_size(width, height):
        if width < 0 or height < 0:
            raise InvalidArgumentError(f"grid size must be non-negative, got {width}x{height}",
                                       context={"width": width, "height": height})

    def initialize(self, width, height):
        """Allocate an all-empty table, discarding any previous contents."""
        self.check_size(width, height)
        if self._rows is not None:
            self._log.debug("grid reallocated", old_width=self.width, old_height=self.height,
                            width=width, height=height)
        self._rows = [[None] * height for _ in range(width)]

    def in_bounds(self, x, y):
        rows = self._table()
        if not rows or not rows[0]:
            return False
        return 0 <= x < len(rows) and 0 <= y < len(rows[0])

    def put(self, x, y, occupant):
        self._column(x, y)[y] = occupant

    def get(self, x, y):
        return self._column(x, y)[y]

    def free(self, x, y):
        self.put(x, y, None)

    def rows(self):
        """The live table. Writing into it writes into the grid."""
        return self._table()

    def rows_copy(self):
        """Fresh outer and inner lists holding the same occupant objects."""
        return [list(column) for column in self._table()]

    def flatten(self):
        """Lazily yield occupied cells' contents, column by column."""
        rows = self._table()
        return (occupant for column in rows for occupant in column if occupant is not None)

    def __iter__(self):
        return self.flatten()

    def __len__(self):
        return sum(1 for _ in self.flatten())

    def _table(self):
        if self._rows is None:
            raise WorldNotInitializedError("grid used before initialize()")
        return self._rows

    def _column(self, x, y):
        # Negative indices would silently wrap on plain lists.
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)
        return self._rows[x]
