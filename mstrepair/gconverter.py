import argparse

from mstrepair.errors import GraphReadError


def to_bin(num: int) -> bytes:
    return int(num).to_bytes(length=4, byteorder='little', signed=True)


def text_to_bin(infile_name: str, outfile_name: str) -> int:
    count = 0
    with open(infile_name, 'r') as infile, open(outfile_name, 'wb') as outfile:
        for line in infile:
            for num in line.split():
                outfile.write(to_bin(num))
                count += 1
    return count


def bin_to_text(infile_name: str, outfile_name: str) -> None:
    with open(infile_name, 'rb') as infile:
        data = infile.read()
    if len(data) % 4:
        raise GraphReadError(f'{infile_name}: size {len(data)} is not a multiple of 4 bytes')

    nums = [int.from_bytes(data[i:i + 4], byteorder='little', signed=True)
            for i in range(0, len(data), 4)]

    with open(outfile_name, 'w') as outfile:
        outfile.write(' '.join(str(n) for n in nums[:2]) + '\n')
        for i in range(2, len(nums), 3):
            outfile.write(' '.join(str(n) for n in nums[i:i + 3]) + '\n')


if __name__ == '__main__':
    parser = argparse.ArgumentParser(prog='gconverter',
                                     description='Convert between graph formats')
    parser.add_argument('-i', '--infile', required=True)
    parser.add_argument('-o', '--outfile', required=True)
    parser.add_argument('-r', '--reverse',
                        action='store_true',
                        help='convert binary back to text')

    args = parser.parse_args()

    if args.reverse:
        bin_to_text(args.infile, args.outfile)
    else:
        text_to_bin(args.infile, args.outfile)
