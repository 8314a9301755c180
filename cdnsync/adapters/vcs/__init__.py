from cdnsync.adapters.vcs.git.diff import GitChangeSource, parse_name_status

__all__ = ["GitChangeSource", "parse_name_status"]
