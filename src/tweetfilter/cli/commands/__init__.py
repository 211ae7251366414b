"""
CLI Commands Package

Contains the individual command implementations for the TweetFilter CLI.
"""
