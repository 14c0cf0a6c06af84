"""
Interpolation polynomiale d'une suite numérique (formule des différences de Newton).

A partir des m premiers termes t_1..t_m d'une suite, on construit l'unique
polynôme de degré m-1 qui passe par tous ces termes, puis on l'évalue en
n'importe quelle position n.
"""


def factorial(k):
    result = 1
    for i in range(2, k + 1):
        result *= i
    return result


# produit décroissant : (n-1)*(n-2)*...*(n-length), vaut 1 pour length = 0
def falling_factorial(n, length):
    result = 1
    for i in range(1, length + 1):
        result *= n - i
    return result


def fmt_number(value):
    """Affichage compact : 7.0 -> '7', 2.5 -> '2.5', 1e300 -> '1e+300', nan -> 'nan'."""
    if isinstance(value, bool):
        value = int(value)
    if isinstance(value, int):
        return str(value)
    value = float(value)
    if value.is_integer() and abs(value) < 1e16:
        return str(int(value))
    return repr(value)


class Sequence:
    """
    Suite définie par ses premiers termes (position n = 1 pour le premier).

    coefficients[i] est la valeur, en n = i + 2, du polynôme qui passe par
    les i + 1 premiers termes. Elle ne dépend que de terms[0..i+1].

    >>> s = Sequence(1, 4, 9, 16)
    >>> s.evaluate(5)
    25.0
    """

    def __init__(self, *terms):
        if not terms:
            raise ValueError("at least one term required")
        self.terms = tuple(terms)

        coefficients = []
        for k in range(1, len(terms)):
            # valeur en n = k+1 du polynôme passant par t[0..k-1]
            value = terms[0]
            for j in range(1, k):
                value = ((terms[j] - coefficients[j - 1]) * falling_factorial(k + 1, j)) / factorial(j) + value
            coefficients.append(value)
        self.coefficients = tuple(coefficients)

    def __repr__(self):
        return "Sequence(%s)" % ", ".join(fmt_number(t) for t in self.terms)

    def __len__(self):
        return len(self.terms)

    @property
    def degree(self):
        return len(self.terms) - 1

    def evaluate(self, n):
        """Valeur du polynôme en la position n (réel quelconque)."""
        terms, coefficients = self.terms, self.coefficients
        result = terms[0]
        for i in range(1, len(terms)):
            result = ((terms[i] - coefficients[i - 1]) * falling_factorial(n, i)) / factorial(i) + result
        return result

    __call__ = evaluate

    def _differences(self):
        # (ordre j, "(t_j - c_{j-1})") du plus haut degré au plus bas
        for k in range(len(self.terms), 1, -1):
            diff = "(%s - %s)" % (fmt_number(self.terms[k - 1]), fmt_number(self.coefficients[k - 2]))
            yield k - 1, diff

    def to_formula(self):
        parts = []
        for j, diff in self._differences():
            factors = "".join("(n-%d)" % i for i in range(1, j + 1))
            parts.append("%s%s/%d!" % (diff, factors, j))
        parts.append(fmt_number(self.terms[0]))
        return " f(n) = " + " + ".join(parts)

    def to_latex(self):
        """Même décomposition que to_formula, en LaTeX (sans délimiteurs $$)."""
        parts = []
        for j, diff in self._differences():
            frac = r"\frac{\displaystyle\prod_{k=1}^{%d} (n - k)}{%d!}" % (j, j)
            parts.append(diff + frac)
        parts.append(fmt_number(self.terms[0]))
        return " f(n) = " + r"\\ + ".join(parts)
