"""Directory archiving."""

import os
import zipfile

def zip_directory(directory):
    """Zip every file under a directory into ``<directory>.zip`` beside it.

    The archive lands next to the absolute directory path, so ``.`` becomes
    ``../<name>.zip``. Entry names are relative to the directory; empty
    directories are skipped and the archive never includes itself.

    Args:
        directory (str): Directory to archive

    Returns:
        str: Path to the created archive
    """
    directory = os.path.abspath(directory)
    if not os.path.isdir(directory):
        raise NotADirectoryError(f"Not a directory: {directory}")

    archive_path = f"{directory.rstrip(os.sep)}.zip"
    with zipfile.ZipFile(archive_path, 'w', zipfile.ZIP_DEFLATED) as archive:
        for root, dirs, files in os.walk(directory):
            dirs.sort()
            for name in sorted(files):
                file_path = os.path.join(root, name)
                if os.path.abspath(file_path) == archive_path:
                    continue
                arcname = os.path.relpath(file_path, directory).replace(os.sep, '/')
                archive.write(file_path, arcname)

    return archive_path
