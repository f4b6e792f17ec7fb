"""HTTP host for the C/C++ energy checker."""
