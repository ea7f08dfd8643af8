import sympy as sy

from combinators import element_at, select, zip_with
from stream import Slot, cons, take


def add_streams(s1, s2):
    return zip_with(s1, s2, lambda x, y: x + y)


def scale_stream(stream, factor):
    return select(stream, lambda x: x * factor)


def partial_sums(stream):
    sums = Slot()
    return sums.bind(cons(stream.head, lambda: add_streams(stream.tail, sums())))


def integrate_series(series, n=1):
    """coefficients of the integral of a power series, without constant term"""
    return cons(sy.Rational(1, n) * series.head, lambda: integrate_series(series.tail, n + 1))


def exp_series():
    exp = Slot()
    return exp.bind(cons(sy.Integer(1), lambda: integrate_series(exp())))


def sin_cos_series():
    sin, cos = Slot(), Slot()
    cos.bind(cons(sy.Integer(1), lambda: scale_stream(integrate_series(sin()), -1)))
    sin.bind(cons(sy.Integer(0), lambda: integrate_series(cos())))
    return sin(), cos()


def evaluate_series(series, x, terms):
    x = sy.sympify(x)
    return sum((c * x ** n for n, c in enumerate(take(terms, series))), sy.Integer(0))


def pi_summands(n):
    return cons(sy.Rational(1, n), lambda: scale_stream(pi_summands(n + 2), -1))


def pi_stream():
    return scale_stream(partial_sums(pi_summands(1)), 4)


def euler_transform(stream):
    s0 = element_at(stream, 0)
    s1 = element_at(stream, 1)
    s2 = element_at(stream, 2)
    return cons(s2 - (s2 - s1) ** 2 / (s0 - 2 * s1 + s2),
                lambda: euler_transform(stream.tail))


def make_tableau(transform, stream):
    return cons(stream, lambda: make_tableau(transform, transform(stream)))


def accelerated_sequence(transform, stream):
    return select(make_tableau(transform, stream), lambda s: s.head)


def integral(delayed_integrand, initial_value, dt):
    result = Slot()
    return result.bind(cons(initial_value,
                            lambda: add_streams(scale_stream(delayed_integrand.force(), dt),
                                                result())))


def solve(func, y0, dt):
    """stream of y(0), y(dt), y(2 dt), ... for dy/dt = func(y) and y(0) = y0"""
    dy = Slot()
    y = integral(dy.delayed(), y0, dt)
    dy.bind(select(y, func))
    return y


if __name__ == "__main__":
    sin, cos = sin_cos_series()
    print("exp(1)          =", evaluate_series(exp_series(), 1, 30).evalf())
    print("sin(1)          =", evaluate_series(sin, 1, 30).evalf())
    print("sin(1) (actual) =", sy.sin(1).evalf())
    print("cos(1)          =", evaluate_series(cos, 1, 30).evalf())
    print("cos(1) (actual) =", sy.cos(1).evalf())
    print()

    pi = pi_stream()
    print("no acceleration  :", element_at(pi, 7).evalf())
    print("Euler's transform:", element_at(euler_transform(pi), 7).evalf())
    print("using tableau    :", element_at(accelerated_sequence(euler_transform, pi), 7).evalf())
    print("actual           :", sy.pi.evalf())
    print()

    print("e by solving dy/dt = y:", element_at(solve(lambda y: y, 1.0, 0.001), 1000))
