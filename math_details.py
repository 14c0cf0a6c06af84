import sympy as sp
from sympy.parsing.sympy_parser import parse_expr, standard_transformations, implicit_multiplication

from sequence import fmt_number


N = sp.Symbol('n')

# "(9 - 7)(n-1)(n-2)/2!" : multiplication implicite + notation factorielle (incluse dans standard)
_TRANSFORMATIONS = standard_transformations + (implicit_multiplication,)


def formula_to_expr(formula):
    """Relit une formule produite par Sequence.to_formula() et renvoie l'expression sympy en n (non développée)."""
    if "=" not in formula:
        raise ValueError("formula must look like 'f(n) = ...'.")
    rhs = formula.split("=", 1)[1]
    return parse_expr(rhs, local_dict={'n': N}, transformations=_TRANSFORMATIONS, evaluate=False)


def evaluate_formula(formula, n):
    """Valeur numérique de la formule texte en la position n."""
    return float(formula_to_expr(formula).subs(N, n).evalf())


def latex_coefficients(sequence):
    """Retourne la liste des c_i en LaTeX (un par coefficient de la suite)."""
    return [r"c_{%d} = %s" % (i, fmt_number(c)) for i, c in enumerate(sequence.coefficients)]
