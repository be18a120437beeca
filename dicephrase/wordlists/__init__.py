"""
Word lists shipped inside the package
Each module exposes WORDS, a tuple of 7776 words in dice order
"""
