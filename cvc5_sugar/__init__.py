from .cvc5_sugar import *
