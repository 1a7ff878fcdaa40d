#!/usr/bin/env python3
import argparse, csv, os
from seanle.daily import day_index
from seanle.grid import to_ascii
from seanle.mapgen.generator import generate_grid, generate_level

def write_tsv(mat, path, include_header=False):
    with open(path, 'w', newline='') as f:
        w = csv.writer(f, delimiter='\t')
        if include_header:
            w.writerow(list(range(len(mat[0]))))
        for r in mat:
            w.writerow(r)

def cmd_emit(args):
    mat = generate_grid(args.seed)
    write_tsv(mat, args.out, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_golden(args):
    os.makedirs(args.outdir, exist_ok=True)
    for seed in range(args.start, args.start + args.count):
        path = os.path.join(args.outdir, f"{seed:05d}.tsv")
        write_tsv(generate_grid(seed), path, include_header=False)
    print(f"Wrote golden pack to {args.outdir}")

def cmd_show(args):
    seed = args.seed if args.seed is not None else day_index()
    level = generate_level(seed)
    print(f"Daily Seanle #{seed}")
    print(to_ascii(level.grid))
    for ch, (r, c) in level.features.letters.items():
        print(f"  {ch} at row {r}, col {c}")

def cmd_today(args):
    print(day_index())

def main():
    p = argparse.ArgumentParser()
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit')
    p1.add_argument('--seed', type=int, required=True)
    p1.add_argument('--out', type=str, required=True)
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('golden')
    p2.add_argument('--start', type=int, required=True)
    p2.add_argument('--count', type=int, default=30)
    p2.add_argument('--outdir', type=str, default=os.path.join('data', 'golden_levels'))
    p2.set_defaults(func=cmd_golden)
    p3 = sub.add_parser('show')
    p3.add_argument('--seed', type=int, default=None)
    p3.set_defaults(func=cmd_show)
    p4 = sub.add_parser('today')
    p4.set_defaults(func=cmd_today)
    args = p.parse_args()
    args.func(args)

if __name__ == '__main__':
    main()
