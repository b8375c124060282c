import numpy as np

# golden ratio and its conjugate. psi + psi**2 = 1; the second
# coefficient is taken as 1 - psi so that split points are affine
# combinations of their endpoints.
PHI = (1 + np.sqrt(5.)) / 2
PSI = (np.sqrt(5.) - 1) / 2
PSI2 = 1. - PSI
