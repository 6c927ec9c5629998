"""Parameters of the toy pairing over F_47.

The curve y^2 = x^3 + 21x + 15 over F_47 has a subgroup of order r = 17 with embedding degree k = 4. The pairing is
computed over F_47^4 = F_47[x] / (x^4 - 4x^2 + 5).
"""

# Characteristic of the base field
q = 47
# Curve coefficients
a = 21
b = 15
# Order of the subgroup
r = 17
# Embedding degree of the subgroup of order r
EXTENSION_DEGREE = 4
# Modulus of F_q^4 over F_q: x^4 - 4x^2 + 5
MODULUS_FQ4 = [5, 0, -4, 0, 1]
# Generator of the r-torsion over F_q
G1 = (45, 23)
# Point of order r over F_q^4, outside of the subgroup generated by G1
G2 = ([29, 0, 31], [0, 11, 0, 35])
