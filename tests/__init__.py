"""
Test suite for toyrsa

- tests/unit/ : unit tests per module
"""
