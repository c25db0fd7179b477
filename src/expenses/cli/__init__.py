"""
Command Line Interface Package

Single entry point (`expenses`) for the expense ledger.

Command Structure:
- expenses list
- expenses add AMOUNT MEMO
- expenses clear
- expenses delete ID
- expenses search TERM

Anything else prints the command summary.
"""
