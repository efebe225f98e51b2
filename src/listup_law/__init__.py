"""e-Gov 法令データ一式から法令の公布日・法令名・法令番号・改正履歴をリストアップする"""

__version__ = "0.7.2"
