################################################################################
# pymetardecoder/code_tables.py
#
# Base code table classes for pymetardecoder
#
# 2026-10-19:
#   * First version
################################################################################
# CONFIGURATION
################################################################################
import re
import pymetardecoder
################################################################################
# BASE CLASSES
################################################################################
class CodeTable(object):
    """
    Base class for a code table: an ordered, read-only collection of entries,
    each with a code attribute. Subclasses set _ENTRIES and _DESCRIPTION
    """
    _ENTRIES = ()
    _DESCRIPTION = "code table"
    @classmethod
    def codes(cls, entries=None):
        """
        Returns the codes of the table, in declaration order

        :param iterable entries: Subset of entries to use (default: all)
        :rtype: list of strings
        """
        if entries is None:
            entries = cls._ENTRIES
        return [e.code for e in entries]
    @classmethod
    def lookup(cls, code):
        """
        Returns the entry whose code is exactly equal to code

        :param string code: Code to look up
        :returns: Matching entry
        :raises: pymetardecoder.InvalidCode if the code is not in the table
        """
        for entry in cls._ENTRIES:
            if entry.code == code:
                return entry
        raise pymetardecoder.InvalidCode(code, cls._DESCRIPTION)
    @classmethod
    def decode(cls, code):
        """
        Returns the description for code
        """
        return cls.lookup(code).description
    @classmethod
    def alternation(cls, entries=None):
        """
        Returns a regular expression alternation of the codes. Longer codes
        come first so that a code which is a prefix of another one cannot
        shadow it

        :param iterable entries: Subset of entries to use (default: all)
        :rtype: string
        """
        codes = sorted(cls.codes(entries), key=len, reverse=True)
        return "|".join(re.escape(c) for c in codes)
