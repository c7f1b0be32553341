"""
runeset.base.blocks - output pixels as text using block elements

(c) 2024 runeset contributors
licence: https://opensource.org/licenses/MIT
"""

from itertools import zip_longest


class blockstr(str):
    """str that is shown as block text in interactive session."""
    def __repr__(self):
        return f'"""\\\n{self}"""'


# quadrant block elements
# indexed by top-left + 2 * top-right + 4 * bottom-left + 8 * bottom-right
QUADRANTS = (
    ' ', '▘', '▝', '▀',
    '▖', '▌', '▞', '▛',
    '▗', '▚', '▐', '▜',
    '▄', '▙', '▟', '█',
)


def quadrant_index(top_left, top_right, bottom_left, bottom_right):
    """Index of a 2x2 cell into the quadrant table."""
    return (
        bool(top_left)
        + 2 * bool(top_right)
        + 4 * bool(bottom_left)
        + 8 * bool(bottom_right)
    )


def matrix_to_blocks(matrix):
    """
    Convert bit matrix to a matrix of quadrant block characters.
    Odd widths and heights are padded with paper.
    """
    matrix = tuple(tuple(_row) for _row in matrix)
    return [
        [
            QUADRANTS[quadrant_index(*_top, *_bottom)]
            for _top, _bottom in zip(
                zip_longest(*[iter(_toprow)]*2, fillvalue=0),
                zip_longest(*[iter(_bottomrow)]*2, fillvalue=0),
            )
        ]
        for _toprow, _bottomrow in zip_longest(
            matrix[::2], matrix[1::2], fillvalue=(0,) * len(matrix[0])
        )
    ] if matrix else []
