"""Prime-field polynomials, routing targets, witnesses, Halo helpers and opening sets for PLONK-style proofs."""

__version__ = "0.1.0"