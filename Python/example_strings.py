from combinators import element_at
from stream import iterate

FLIP = str.maketrans('01', '10')


def parens(inner=''):
    """balanced parentheses around inner, one more pair per element"""
    return iterate(lambda s: '(' + s + ')', inner)


def cantor_set(inner='O'):
    """Cantor set on the closed interval [0, 1], drawn as strings"""
    return iterate(lambda s: s + ' ' * len(s) + s, inner)


def thue_morse():
    return iterate(lambda s: s + s.translate(FLIP), '0')


if __name__ == "__main__":
    for i in range(1, 4):
        print(element_at(parens(), i))
    print()

    for i in range(4):
        print(element_at(cantor_set(), i))
    print()

    for prefix in thue_morse().take(5):
        print(prefix)
