"""
gasim CLI - Command-line interface for the sandbox.

Usage:
    gasim serve [--host H] [--port P]    Run the HTTP API
    gasim catalog [--search TERM]        Fetch and list catalog cards
    gasim demo [--seed N]                Play a scripted game on the sample deck
"""

import argparse
import logging
import sys


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="gasim - Grand Archive sandbox simulator",
        prog="gasim",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Bind address")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port")

    # Catalog command
    catalog_parser = subparsers.add_parser("catalog", help="Fetch the card catalog")
    catalog_parser.add_argument("--search", help="Filter by card name")
    catalog_parser.add_argument("--set", dest="set_prefix", help="Set prefix to fetch")

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Scripted game on the sample deck")
    demo_parser.add_argument("--seed", type=int, default=0, help="Shuffle seed")
    demo_parser.add_argument("--draws", type=int, default=5, help="Cards to draw")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "serve":
        cmd_serve(args)
    elif args.command == "catalog":
        cmd_catalog(args)
    elif args.command == "demo":
        cmd_demo(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_serve(args):
    """Run the API with uvicorn."""
    import uvicorn

    uvicorn.run("gasim.api.app:app", host=args.host, port=args.port)


def cmd_catalog(args):
    """Fetch the catalog and print card names."""
    from .catalog import CatalogClient, search_cards

    client = CatalogClient(set_prefix=args.set_prefix) if args.set_prefix else CatalogClient()
    cards = client.fetch_cards()
    if args.search:
        cards = search_cards(cards, args.search)

    if not cards:
        print("No cards found")
        sys.exit(1)

    for card in cards:
        print(f"{card.name:40s} {card.element:6s} cost {card.cost}  {', '.join(card.types)}")
    print(f"\n{len(cards)} card(s)")


def cmd_demo(args):
    """Load the sample deck, draw, play and rest a few cards."""
    from .deck import DeckBuilder
    from .deck.samples import SAMPLE_MATERIAL, SAMPLE_MAIN
    from .engine_core.state import ZoneName
    from .session import SessionManager

    builder = DeckBuilder()
    builder.add_all(SAMPLE_MATERIAL + SAMPLE_MAIN)

    manager = SessionManager()
    session = manager.create_session(seed=args.seed)
    deck = builder.to_action()
    session.load_deck(deck.material, deck.main)

    session.draw_material()
    for _ in range(args.draws):
        session.draw_card()

    hand = session.state.hand
    if hand:
        session.move_card(hand[0].uid, ZoneName.BATTLE_ZONE)
        session.toggle_rest(hand[0].uid)
    champion = session.state.material_zone[0]
    session.toggle_rest(champion.uid)

    print(f"Session {session.session_id} (seed {session.seed})\n")
    for zone, cards in session.state.zones().items():
        names = ", ".join(
            f"{card.name}{' (rested)' if card.rested else ''}" for card in cards
        )
        print(f"{zone.value:14s} {len(cards):3d}  {names}")


if __name__ == "__main__":
    main()
