"""Solutions to classic programming-contest problems, one function per problem."""

__version__ = "0.1.0"