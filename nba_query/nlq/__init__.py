"""
Natural language query package: parse -> plan -> execute -> synthesize.
"""
