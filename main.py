import logging

from clara.engine import RenameEngine
from clara.errors import InvalidPathError
from clara.utils import ensure_directory

def ask_yes_no(prompt: str) -> bool:
    return input(prompt + " [y/N]: ").strip().lower() == "y"

def ask_folder():
    try:
        return ensure_directory(input("Folder with the scanned pages: ").strip())
    except InvalidPathError as e:
        print(f"Error: {e}")
        return None

def rename_flow(engine: RenameEngine):
    folder = ask_folder()
    if folder is None:
        return
    extension = input("Extension filter (blank = any): ").strip() or None
    start = input("Start number (blank = 1): ").strip() or None

    # Preview
    try:
        scan = engine.scan(folder, extension)
    except OSError as e:
        print(f"Error: cannot read folder: {e}")
        return
    print(f"\n--- PREVIEW --- ({scan.matched} of {scan.total} files match, first 30 shown)")
    for item in scan.items[:30]:
        print(f"{item.name:50} {item.date:%Y-%m-%d}  p.{item.page}")

    if not scan.items:
        return
    if not ask_yes_no("Proceed with rename?"):
        print("Aborted (preview only).")
        return

    result = engine.run(folder, extension, start)
    print(f"\nDone. Renamed {result.renamed} files. Operation: {result.operation_id}")

def undo_flow(engine: RenameEngine):
    last = engine.store.last()
    if last is None:
        print("Nothing to undo in this session.")
        return
    if not ask_yes_no(f"Undo {len(last.mappings)} renames in {last.directory}?"):
        print("Undo cancelled.")
        return
    result = engine.undo()
    print(f"Undo complete. Restored {result.undone} files.")
    for err in result.errors:
        print(f"  failed: {err}")

def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")
    engine = RenameEngine()
    engine.subscribe(print)

    while True:
        print("\n1) Rename files")
        print("2) Undo last rename")
        print("3) Quit")
        action = input("Select: ").strip()
        if action == "1":
            rename_flow(engine)
        elif action == "2":
            undo_flow(engine)
        elif action in ("3", "q", ""):
            break

if __name__ == "__main__":
    main()
