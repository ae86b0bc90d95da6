"""
Essential reprand modules: the bit-generator engine and the preference system.
"""
