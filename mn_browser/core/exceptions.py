class MnBrowserError(Exception):
    """Base exception for all mn_browser errors"""
    pass

class ConfigError(MnBrowserError):
    """Invalid or inconsistent global.json"""
    pass

class AssemblyError(MnBrowserError):
    """
    An assembly file could not be read or turned into a change batch
    unreadable bytes, invalid JSON, etc
    """
    pass
