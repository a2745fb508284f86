from pathlib import Path

from pinsorter.config import load_config
from pinsorter.errors import PinSorterError
from pinsorter.logging_setup import setup_logging
from pinsorter.manifest import CopyManifest
from pinsorter.organizer import organize

def ask_yes_no(prompt: str) -> bool:
    return input(prompt + " [y/N]: ").strip().lower() == "y"

def organize_flow():
    config_file = input("Path to config.json (leave empty for defaults): ").strip() or None
    config = load_config(Path(config_file) if config_file else None)

    print(f"Staging root: {config.staging_root}")
    print(f"Output root:  {config.output_root}")
    if not ask_yes_no("Proceed with organizing?"):
        print("Aborted.")
        return

    try:
        summary = organize(config)
    except PinSorterError as e:
        print(f"Failed: {e}")
        return

    print("\n--- PDF GROUPS ---")
    for r in summary.group_results:
        if r.error:
            print(f"{r.pdf_name:40} ERROR: {r.error}")
            continue
        flag = f"({len(r.errors)} failed)" if r.errors else ""
        print(f"{r.pdf_name:40} -> {r.folder_name} [{r.files_copied} files, {r.folder_count} pinmaps] {flag}")
    print("\n--- NO PDF FOUND ---")
    for o in summary.orphan_results:
        flag = f"({len(o.errors)} failed)" if o.errors else ""
        print(f"{o.folder_name:40} -> {o.destination} [{o.files_copied} files] {flag}")
    for s in summary.skipped_folders:
        print(f"Skipped {s.source}: {s.message}")

    print(f"\nDone. {summary.total_folders} pinmaps, {summary.pdf_group_count} PDF groups, "
          f"{summary.orphan_folder_count} without PDF. Output: {summary.destination_root}")

def sessions_flow():
    config = load_config()
    manifest = CopyManifest(config.output_root)
    sessions = manifest.list_sessions()
    if not sessions:
        print("No sessions found.")
        return
    print("Sessions (newest first):")
    for i, s in enumerate(sessions, 1):
        print(f"{i}. {s}")
    choice = input("Show which session? (number, blank=1): ").strip()
    idx = int(choice) - 1 if choice else 0
    data = manifest.load_summary(sessions[idx])
    print(f"Destination:  {data.get('destinationRoot')}")
    print(f"Pinmaps:      {data.get('totalFolders')}")
    print(f"PDF groups:   {data.get('pdfGroupCount')}")
    print(f"Without PDF:  {data.get('orphanFolderCount')}")
    print(f"Files copied: {data.get('filesCopied')} ({data.get('errorCount')} errors)")

def main():
    setup_logging()
    print("1) Organize staged pinmaps")
    print("2) Show a previous session")
    action = input("Select: ").strip()
    if action == "2":
        sessions_flow()
    else:
        organize_flow()

if __name__ == "__main__":
    main()
