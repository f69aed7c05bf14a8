invalid_drive_letter = (
    '"{}": drive letter must be a single ASCII letter'
)

empty_share_component = '"{}": UNC path is missing its host or share'

unsupported_drive_relative = (
    '"{}": drive-relative paths have no equivalent on the other side'
)

malformed_input = '"{}": not a recognizable path'

relative_path = '"{}": relative path rejected in absolute mode'

mount_root_not_absolute = 'mount root "{}" must start with "/"'

config_not_found = 'configuration file "{}" not found'

config_bad_value = 'configuration file "{}": bad value for "{}"'
