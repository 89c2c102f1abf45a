"""Small number-theory helpers: factorials, powers, digit tests and primes."""

from __future__ import annotations

__all__ = [
    "factorial",
    "power",
    "is_armstrong",
    "is_palindrome_number",
    "to_binary",
    "fibonacci",
    "divisor_sum",
    "is_friendly_pair",
    "is_prime",
    "is_prime_trial",
    "primes_in_range",
    "is_leap_year",
    "multiplication_table",
]


def factorial(n: int) -> int:
    """Return n! computed by repeated multiplication; 1 for n <= 0."""
    result = 1
    for factor in range(1, n + 1):
        result *= factor
    return result


def power(base: int, exponent: int) -> int:
    """Return base raised to exponent by repeated multiplication; 1 for exponent <= 0."""
    result = 1
    for _ in range(exponent):
        result *= base
    return result


def is_armstrong(n: int) -> bool:
    """Return True if n equals the sum of the cubes of its decimal digits."""
    if n <= 0:
        return n == 0
    return n == sum(int(digit) ** 3 for digit in str(n))


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal digits of n read the same both ways.

    Zero counts as a palindrome; negative numbers never do.
    """
    if n < 0:
        return False
    digits = str(n)
    return digits == digits[::-1]


def to_binary(n: int) -> str:
    """Return the binary digits of n; an empty string for n <= 0."""
    return format(n, "b") if n > 0 else ""


def fibonacci(count: int) -> list[int]:
    """Return the first terms of the Fibonacci series.

    The first two terms, 0 and 1, are always included, so the result has
    max(count, 2) terms.
    """
    terms = [0, 1]
    while len(terms) < count:
        terms.append(terms[-1] + terms[-2])
    return terms


def divisor_sum(num: int) -> int:
    """Return the sum of the proper divisors of num."""
    return sum(d for d in range(1, num) if num % d == 0)


def is_friendly_pair(first: int, second: int) -> bool:
    """Return True if both numbers share the same divisor-sum ratio.

    The ratio is taken with integer division, as the whole part of
    divisor_sum(n) / n.
    """
    if first < 1 or second < 1:
        raise ValueError("friendly pairs are defined for positive integers only")
    return divisor_sum(first) // first == divisor_sum(second) // second


def is_prime(n: int) -> bool:
    """Return True if n is prime, testing only divisors of the form 6k +/- 1."""
    if n <= 1:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    candidate = 5
    while candidate * candidate <= n:
        if n % candidate == 0 or n % (candidate + 2) == 0:
            return False
        candidate += 6
    return True


def is_prime_trial(n: int) -> bool:
    """Return True if n has no divisor between 2 and n // 2.

    Only 0 and 1 are rejected outright, so negative values are reported
    as prime.
    """
    if n in (0, 1):
        return False
    return all(n % d != 0 for d in range(2, n // 2 + 1))


def primes_in_range(low: int, high: int) -> list[int]:
    """Return the odd numbers from low to high with no divisor in 2..i // 2.

    Only odd candidates are examined, so 2 is never reported while 1 is.
    An empty list is returned when high is below 2.
    """
    if high < 2:
        return []
    start = low + 1 if low % 2 == 0 else low
    return [
        candidate
        for candidate in range(start, high + 1, 2)
        if all(candidate % d != 0 for d in range(2, candidate // 2 + 1))
    ]


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def multiplication_table(num: int) -> list[str]:
    """Return the ten lines "num * i = product" for i from 1 to 10."""
    return [f"{num} * {i} = {num * i}" for i in range(1, 11)]