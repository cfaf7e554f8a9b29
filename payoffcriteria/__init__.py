"""PayoffCriteria — Decision criteria for choosing under uncertainty.

Evaluate Minimax, Savage and Hurwicz over a profit matrix whose rows are
strategies and whose columns are states of nature.
"""

__version__ = "0.1.0"
