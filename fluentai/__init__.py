"""
FluentAI: personalized language lessons generated by an OpenAI assistant.
"""
__version__ = "1.0.0"
