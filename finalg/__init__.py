'''
finite groups, their elements, cosets, factor groups and homomorphisms.

common groups can be obtained by name, as module attributes:

	>>> import finalg
	>>> len(finalg.S3), len(finalg.A4), len(finalg.D5), len(finalg.Z6), len(finalg.U8)
	(6, 12, 10, 6, 4)

`Zn` is the additive group of residues mod n, `Un` the multiplicative group of
units mod n, `Sn` / `An` the symmetric / alternating group on n points and
`Dn` the dihedral group of the n-gon.
'''

import re

from .errors import *
from .element import Element
from .modulo import Residue, AdditiveResidue, MultiplicativeResidue
from .permutation import Permutation, AlternatingPermutation, SparsePermutation, cube_rotation_group
from .dihedral import Dihedral
from .directproduct import DirectProductElement, direct_product_group, from_decomposition
from .finite import FiniteGroup, AbelianDecomposition
from .factor import CosetSide, Coset, FactorGroup
from .homomorphism import Homomorphism
from . import errors

__all__ = [
	'Element',
	'Residue', 'AdditiveResidue', 'MultiplicativeResidue',
	'Permutation', 'AlternatingPermutation', 'SparsePermutation', 'cube_rotation_group',
	'Dihedral',
	'DirectProductElement', 'direct_product_group', 'from_decomposition',
	'FiniteGroup', 'AbelianDecomposition',
	'CosetSide', 'Coset', 'FactorGroup',
	'Homomorphism',
	*errors.__all__,
]


# AUTOMAGICAL GROUP CREATION
# --------------------------

GENERATORS = {
	'Z': AdditiveResidue.generate_group,
	'U': MultiplicativeResidue.generate_group,
	'S': Permutation.generate_group,
	'A': AlternatingPermutation.generate_group,
	'D': Dihedral.generate_group,
}

def __getattr__(name: str):
	if (m := re.fullmatch(r'([A-Z])([1-9]\d*)', name)) and (generate := GENERATORS.get(m.group(1))) != None:
		group = FiniteGroup(generate(int(m.group(2))))
		globals()[name] = group
		return group
	raise AttributeError(f'module {__name__!r} has no attribute {name!r}')
