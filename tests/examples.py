from rawfrac.frac import F


#
# integer pairs: a, b, gcd, lcm
#

FACTORS = [
    (2, 3, 1, 6),
    (2, 4, 2, 4),
    (3, 5, 1, 15),
    (-3, 5, 1, 15),
    (3, -5, 1, 15),
    (-3, -5, 1, 15),
]


#
# fraction pairs with expected results; arithmetic results are reduced
#

FRACTION_PAIRS = [
    {
        'a': F(1, 2), 'b': F(1, 2),
        'norm': (F(1, 2), F(1, 2)), 'norm_to': F(1, 2), 'reduce': F(1, 2),
        'add': F(1, 1), 'sub': F(0, 1), 'mul': F(1, 4), 'div': F(1, 1),
    },
    {
        'a': F(2, 1), 'b': F(2, 1),
        'norm': (F(2, 1), F(2, 1)), 'norm_to': F(2, 1), 'reduce': F(2, 1),
        'add': F(4, 1), 'sub': F(0, 1), 'mul': F(4, 1), 'div': F(1, 1),
    },
    {
        'a': F(1, 2), 'b': F(2, 1),
        'norm': (F(1, 2), F(4, 2)), 'norm_to': F(1, 2), 'reduce': F(1, 2),
        'add': F(5, 2), 'sub': F(-3, 2), 'mul': F(1, 1), 'div': F(1, 4),
    },
    {
        'a': F(12, 2), 'b': F(3, 4),
        'norm': (F(24, 4), F(3, 4)), 'norm_to': F(24, 4), 'reduce': F(6, 1),
        'add': F(27, 4), 'sub': F(21, 4), 'mul': F(9, 2), 'div': F(8, 1),
    },
    {
        'a': F(4, 3), 'b': F(3, 2),
        'norm': (F(8, 6), F(9, 6)), 'norm_to': F(8, 6), 'reduce': F(4, 3),
        'add': F(17, 6), 'sub': F(-1, 6), 'mul': F(2, 1), 'div': F(8, 9),
    },
]


#
# text: input, output of str, parsed fraction
#

STRINGS = [
    ('3/2', '3/2', F(3, 2)),
    ('3/-2', '-3/2', F(3, -2)),
    ('-3/-2', '3/2', F(-3, -2)),
    ('+4/3', '4/3', F(4, 3)),
    ('7', '7/1', F(7, 1)),
    ('7/', '7/1', F(7, 1)),
    ('0/0', '0/0', F(0, 0)),
]

BAD_STRINGS = [
    '', '/2', ' 3/2', '3/ 2', '3/2 ', '3/2/1', 'a/b', '1.5', '3_0/2', '--3', '0x10',
    '1' * 5000 + '/x', '3/' + '1' * 5000 + 'x',
]


def get_sample_fractions():
    """Fractions with nonzero denominators of all sign combinations, some not reduced."""
    terms = [-12, -5, -2, -1, 1, 2, 3, 4, 6, 9]
    return [F(n, d) for n in terms + [0] for d in terms]
