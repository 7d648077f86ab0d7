"""
HTTP interface of the tokenization bounded context.
"""
