# Format :: (major, minor, patch, build, meta, status)
VERSION = (1, 0, 0, 0, 'a1f3c2e', 'released')
