from pond.errors import PondFormatError
from pond.loader import load_pond
from pond.pathfinding import candidate_queue, cell_priority, find_path, is_available, is_near_alligator
from pond.render_ascii import render_pond_ascii


def run_repl(pond, source=None):
    """
    Interactive shell over one pond. `source` is the file the pond came
    from; `reset` reloads it (flies eaten by `path` come back).
    """
    print("Frog Path")
    print("Type 'help' for commands. Type 'exit' to quit.\n")

    last_path = None

    while True:
        try:
            raw = input(f"[{len(pond)} cells | {pond.total_flies()} flies]> ").strip()
        except EOFError:
            break
        cmd = raw.lower()

        if cmd in ("quit", "exit"):
            break

        elif cmd == "help":
            print("Commands:")
            print("  map                 - show ascii pond (last path marked with *)")
            print("  ids                 - show cell ids on the map")
            print("  path                - run the search from the start cell")
            print("  best <cell_id>      - list candidate moves from a cell, best first")
            print("  cell <cell_id>      - inspect one cell")
            print("  flies               - list cells that still have flies")
            print("  reset               - reload the pond file")

        elif cmd == "map":
            print(render_pond_ascii(pond, path=last_path))

        elif cmd == "ids":
            print(render_pond_ascii(pond, show_ids=True))

        elif cmd == "path":
            result = find_path(pond)
            last_path = result.path
            for e in result.events:
                print(" ", e)
            print(result.trace())

        elif cmd.startswith("best"):
            handle_best(pond, cmd)

        elif cmd.startswith("cell"):
            handle_cell(pond, cmd)

        elif cmd == "flies":
            food = [c for c in pond if c.is_food and c.flies]
            if not food:
                print("(no flies left)")
            for c in food:
                print(f"  {c.cell_id}: {c.flies} flies at {c.hex}")

        elif cmd == "reset":
            if source is None:
                print("Nothing to reload from.")
                continue
            try:
                pond = load_pond(source)
            except PondFormatError as e:
                print(f"Error initializing pond: {e}")
                continue
            last_path = None
            print(f"Reloaded {source}")

        elif not cmd:
            continue

        else:
            print("Unknown command")


def _parse_cell(pond, cmd: str, usage: str):
    parts = cmd.split()
    if len(parts) != 2:
        print(usage)
        return None
    try:
        cell_id = int(parts[1])
    except ValueError:
        print("cell_id must be an integer.")
        return None
    cell = pond.get_cell(cell_id)
    if cell is None:
        print(f"No such cell {cell_id}.")
    return cell


def handle_best(pond, cmd: str) -> None:
    cell = _parse_cell(pond, cmd, "Usage: best <cell_id>")
    if cell is None:
        return
    queue = candidate_queue(cell)
    if queue.is_empty():
        print(f"No move from {cell.cell_id}.")
        return
    for c, priority in queue.items():
        print(f"  {c.cell_id} [{priority}]")


def handle_cell(pond, cmd: str) -> None:
    cell = _parse_cell(pond, cmd, "Usage: cell <cell_id>")
    if cell is None:
        return
    print(f"{cell.cell_id} at {cell.hex}")
    print(f"  Terrain: {cell.terrain.name}")
    if cell.is_end:
        print("  Goal")
    if cell.is_food:
        print(f"  Flies: {cell.flies}")
    print(f"  Priority: {cell_priority(cell)}")
    print(f"  Available: {is_available(cell)}  Near alligator: {is_near_alligator(cell)}")
    print("  Neighbours: " + ", ".join(str(n.cell_id) for n in cell.neighbors()))
