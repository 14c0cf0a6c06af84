import numpy as np
import matplotlib.pyplot as plt

from sequence import Sequence, fmt_number


DEFAULT_PREVIEW = 10


# Découpe "1, 4, 9, 16" en liste de nombres. Lève ValueError sur un terme illisible.
def parse_terms(text):
    terms = []
    for token in text.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            terms.append(float(token))
        except ValueError:
            raise ValueError(f"terme invalide : {token!r}") from None
    return terms


# Table (n, f(n)) pour n = 1..count
def preview_table(sequence, count=DEFAULT_PREVIEW):
    return [(n, sequence.evaluate(n)) for n in range(1, count + 1)]


def plot_sequence(sequence, count=DEFAULT_PREVIEW):
    """
    Trace le polynôme interpolateur sur [1, count] et les termes connus.
    Le polynôme est évalué sur une grille dense (positions non entières).
    """
    n_dense = np.linspace(1, count, 400)
    f_dense = [sequence.evaluate(n) for n in n_dense]
    n_known = np.arange(1, len(sequence.terms) + 1)

    plt.figure(figsize=(8, 5))
    plt.plot(n_dense, f_dense, 'g-', linewidth=1.5, label='Polynôme de Newton')
    plt.scatter(n_known, sequence.terms, c='orange', s=50, edgecolor='k', zorder=5, label='Termes donnés')
    plt.xlabel('n')
    plt.ylabel('f(n)')
    plt.title(f"Suite interpolée (degré {sequence.degree})")
    plt.legend()
    plt.grid(True)
    plt.tight_layout()
    plt.show()


def print_details(sequence, count=DEFAULT_PREVIEW):
    print("\nFormule :", sequence.to_formula())
    print("LaTeX   :", sequence.to_latex())
    coefs = [f"c{i} = {fmt_number(c)}" for i, c in enumerate(sequence.coefficients)]
    print("Coefficients :", ", ".join(coefs) or "(aucun)")
    print("\n  n | f(n)")
    for n, value in preview_table(sequence, count):
        print(f"{n:>3} | {value:.6g}")


if __name__ == "__main__":
    print("\n=== MENU SUITES NUMERIQUES ===")
    print("1. Formule et premiers termes")
    print("2. Formule, premiers termes et tracé")

    choice = input("\nQuel mode veux-tu utiliser ? (1 / 2) : ").strip()

    if choice in ("1", "2"):
        text = input("Termes de la suite, séparés par des virgules (ex: 1, 4, 9, 16) : ")
        try:
            sequence = Sequence(*parse_terms(text))
        except ValueError as e:
            print(f"\n⚠️ Erreur : {e}")
            raise SystemExit(1)

        print_details(sequence)
        if choice == "2":
            plot_sequence(sequence)

    else:
        print("\n⚠️ Choix non valide. Veuillez relancer le programme.")
