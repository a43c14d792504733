from .polynomials import (
    Polynomial,
    get_coefficient, set_coefficient, normalize,
    new, degree, plus, minus, negate, times, compose,
    evaluate, differentiate, to_string,
    support, terms, sparse)
