import logging

import yaml  # Requires PyYAML: pip install PyYAML

log = logging.getLogger(__name__)


def write_backup(counts: dict, backup_filepath) -> bool:
    """
    Writes every item and its count to the backup file, one "name count" per line.

    The file is overwritten in full. A file that cannot be opened is only a
    warning; the caller carries on without a backup.
    Returns True when the backup was written.
    """
    try:
        with open(backup_filepath, 'w', encoding='utf-8', errors='surrogateescape') as outfile:
            for item, count in sorted(counts.items()):
                outfile.write(f"{item} {count}\n")
    except OSError as e:
        log.warning(f"Could not write backup file {backup_filepath}: {e}")
        return False

    log.info(f"Backup of {len(counts)} items written to: {backup_filepath}")
    return True


def export_summary_yaml(counts: dict, output_filepath, source=None, backup=None) -> bool:
    """Writes a YAML summary of the purchase counts. Returns True on success."""
    summary = {
        'source': str(source) if source is not None else None,
        'backup': str(backup) if backup is not None else None,
        'total_purchases': sum(counts.values()),
        'distinct_items': len(counts),
        'counts': dict(sorted(counts.items())),
    }
    try:
        with open(output_filepath, 'w', encoding='utf-8') as f:
            yaml.safe_dump(summary, f, default_flow_style=False, sort_keys=False, allow_unicode=True)
    except (OSError, yaml.YAMLError) as e:
        log.warning(f"Could not write YAML summary {output_filepath}: {e}")
        return False

    log.info(f"YAML summary written to: {output_filepath}")
    return True
