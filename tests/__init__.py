# Auto-generated __init__.py

from . import conftest
from .conftest import store
from .conftest import stub_akinus_modules
from .conftest import trash_dir
from .conftest import work_dir
from . import test_cleanup
from .test_cleanup import test_age_boundary
from .test_cleanup import test_dangling_record_is_dropped
from .test_cleanup import test_deletion_time_wins_over_mtime
from .test_cleanup import test_legacy_record_falls_back_to_mtime
from .test_cleanup import test_missing_trash_dir_is_empty_report
from .test_cleanup import test_no_orphans_after_mixed_operations
from .test_cleanup import test_one_bad_entry_does_not_stop_sweep
from .test_cleanup import test_prunes_empty_directories_keeps_root
from .test_cleanup import test_records_outside_trash_dir_still_expire
from .test_cleanup import test_skip_leaves_protected_files
from .test_cleanup import test_unrecorded_files_expire_by_mtime
from .test_cleanup import test_uses_store_ttl_by_default
from .test_cleanup import test_walk_error_is_reported_and_sweep_continues
from . import test_cli
from .test_cli import home
from .test_cli import test_cli_aliases
from .test_cli import test_cli_bad_settings_section
from .test_cli import test_cli_batch_continues_after_error
from .test_cli import test_cli_corrupt_store
from .test_cli import test_cli_delete_list_restore
from .test_cli import test_cli_gc_default_ttl_keeps_recent
from .test_cli import test_cli_gc_invalid_ttl
from .test_cli import test_cli_gc_with_ttl
from .test_cli import test_cli_list_long
from .test_cli import test_cli_lock_busy
from .test_cli import test_cli_overrides
from .test_cli import test_cli_refuses_store_file
from .test_cli import test_cli_relative_paths
from .test_cli import test_cli_restore_unknown_is_success
from .test_cli import test_cli_settings_file
from .test_cli import test_cli_unreadable_settings
from .test_cli import test_help_exits_zero
from .test_cli import test_missing_command_is_usage_error
from . import test_models
from .test_models import test_config_lock_sits_next_to_store
from .test_models import test_trash_record_is_immutable
from .test_models import test_trash_record_json_shape
from .test_models import test_trash_record_without_timestamp_displays_dash
from . import test_paths
from .test_paths import test_canonicalize_collapses_symlinked_parent
from .test_paths import test_canonicalize_keeps_final_symlink
from .test_paths import test_canonicalize_missing_parent_lenient
from .test_paths import test_canonicalize_missing_parent_strict
from .test_paths import test_canonicalize_rejects_non_files
from .test_paths import test_canonicalize_relative_to_cwd
from .test_paths import test_mirrored_destination
from .test_paths import test_prune_ignores_paths_outside_trash
from .test_paths import test_prune_never_removes_trash_root
from .test_paths import test_prune_stops_at_non_empty
from . import test_session
from .test_session import config
from .test_session import test_lock_is_exclusive
from .test_session import test_lock_release_is_idempotent
from .test_session import test_session_busy_lock
from .test_session import test_session_corrupt_store_untouched
from .test_session import test_session_saves_on_error
from .test_session import test_session_saves_on_exit
from . import test_settings
from .test_settings import test_cli_overrides_win
from .test_settings import test_defaults_when_no_file
from .test_settings import test_home_env_override
from .test_settings import test_malformed_settings_raise_value_error
from .test_settings import test_parse_ttl
from .test_settings import test_parse_ttl_rejects
from .test_settings import test_unreadable_settings_raise_value_error
from .test_settings import test_user_settings_merge_per_section
from . import test_store
from .test_store import test_corrupt_store_raises
from .test_store import test_find_by_trash_path
from .test_store import test_legacy_entries_follow_stored_dir
from .test_store import test_legacy_null_entries_load
from .test_store import test_missing_file_loads_empty
from .test_store import test_null_pathmap_is_empty
from .test_store import test_put_get_remove
from .test_store import test_save_leaves_no_temp_files
from .test_store import test_save_then_load
from .test_store import test_unknown_fields_are_tolerated
from . import test_trash
from .test_trash import test_list_keeps_insertion_order
from .test_trash import test_move_directory_refused
from .test_trash import test_move_failure_keeps_file_and_store
from .test_trash import test_move_inside_trash_refused
from .test_trash import test_move_logs_source_and_destination
from .test_trash import test_move_missing_file
from .test_trash import test_move_missing_parent
from .test_trash import test_move_protected_file_refused
from .test_trash import test_move_relative_path_uses_cwd
from .test_trash import test_move_symlink_trashes_link
from .test_trash import test_move_to_trash
from .test_trash import test_redelete_keeps_old_record_when_old_copy_cannot_be_removed
from .test_trash import test_redelete_removes_copy_from_other_slot
from .test_trash import test_redelete_replaces_old_trash_copy
from .test_trash import test_report_scenario
from .test_trash import test_restore_keeps_non_empty_trash_dirs
from .test_trash import test_restore_missing_parent_keeps_record
from .test_trash import test_restore_never_overwrites
from .test_trash import test_restore_removes_empty_trash_dirs
from .test_trash import test_restore_twice_is_noop
from .test_trash import test_restore_without_record_is_noop
from .test_trash import test_round_trip_is_byte_identical
from .test_trash import test_same_basename_from_two_directories

__all__ = [
    "conftest",
    "test_cleanup",
    "test_cli",
    "test_models",
    "test_paths",
    "test_session",
    "test_settings",
    "test_store",
    "test_trash",
    "config",
    "home",
    "store",
    "stub_akinus_modules",
    "test_age_boundary",
    "test_canonicalize_collapses_symlinked_parent",
    "test_canonicalize_keeps_final_symlink",
    "test_canonicalize_missing_parent_lenient",
    "test_canonicalize_missing_parent_strict",
    "test_canonicalize_rejects_non_files",
    "test_canonicalize_relative_to_cwd",
    "test_cli_aliases",
    "test_cli_bad_settings_section",
    "test_cli_batch_continues_after_error",
    "test_cli_corrupt_store",
    "test_cli_delete_list_restore",
    "test_cli_gc_default_ttl_keeps_recent",
    "test_cli_gc_invalid_ttl",
    "test_cli_gc_with_ttl",
    "test_cli_list_long",
    "test_cli_lock_busy",
    "test_cli_overrides",
    "test_cli_overrides_win",
    "test_cli_refuses_store_file",
    "test_cli_relative_paths",
    "test_cli_restore_unknown_is_success",
    "test_cli_settings_file",
    "test_cli_unreadable_settings",
    "test_config_lock_sits_next_to_store",
    "test_corrupt_store_raises",
    "test_dangling_record_is_dropped",
    "test_defaults_when_no_file",
    "test_deletion_time_wins_over_mtime",
    "test_find_by_trash_path",
    "test_help_exits_zero",
    "test_home_env_override",
    "test_legacy_entries_follow_stored_dir",
    "test_legacy_null_entries_load",
    "test_legacy_record_falls_back_to_mtime",
    "test_list_keeps_insertion_order",
    "test_lock_is_exclusive",
    "test_lock_release_is_idempotent",
    "test_malformed_settings_raise_value_error",
    "test_mirrored_destination",
    "test_missing_command_is_usage_error",
    "test_missing_file_loads_empty",
    "test_missing_trash_dir_is_empty_report",
    "test_move_directory_refused",
    "test_move_failure_keeps_file_and_store",
    "test_move_inside_trash_refused",
    "test_move_logs_source_and_destination",
    "test_move_missing_file",
    "test_move_missing_parent",
    "test_move_protected_file_refused",
    "test_move_relative_path_uses_cwd",
    "test_move_symlink_trashes_link",
    "test_move_to_trash",
    "test_no_orphans_after_mixed_operations",
    "test_null_pathmap_is_empty",
    "test_one_bad_entry_does_not_stop_sweep",
    "test_parse_ttl",
    "test_parse_ttl_rejects",
    "test_prune_ignores_paths_outside_trash",
    "test_prune_never_removes_trash_root",
    "test_prune_stops_at_non_empty",
    "test_prunes_empty_directories_keeps_root",
    "test_put_get_remove",
    "test_records_outside_trash_dir_still_expire",
    "test_redelete_keeps_old_record_when_old_copy_cannot_be_removed",
    "test_redelete_removes_copy_from_other_slot",
    "test_redelete_replaces_old_trash_copy",
    "test_report_scenario",
    "test_restore_keeps_non_empty_trash_dirs",
    "test_restore_missing_parent_keeps_record",
    "test_restore_never_overwrites",
    "test_restore_removes_empty_trash_dirs",
    "test_restore_twice_is_noop",
    "test_restore_without_record_is_noop",
    "test_round_trip_is_byte_identical",
    "test_same_basename_from_two_directories",
    "test_save_leaves_no_temp_files",
    "test_save_then_load",
    "test_session_busy_lock",
    "test_session_corrupt_store_untouched",
    "test_session_saves_on_error",
    "test_session_saves_on_exit",
    "test_skip_leaves_protected_files",
    "test_trash_record_is_immutable",
    "test_trash_record_json_shape",
    "test_trash_record_without_timestamp_displays_dash",
    "test_unknown_fields_are_tolerated",
    "test_unreadable_settings_raise_value_error",
    "test_unrecorded_files_expire_by_mtime",
    "test_user_settings_merge_per_section",
    "test_uses_store_ttl_by_default",
    "test_walk_error_is_reported_and_sweep_continues",
    "trash_dir",
    "work_dir",
]
