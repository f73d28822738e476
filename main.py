"""
Fourier Playground
Frequency-domain image editing: spectrum masks, presets, live reconstruction
"""

import logging
import sys
import warnings

warnings.filterwarnings('ignore', category=RuntimeWarning)

PRESETS = {
    'lowpass': ('apply_low_pass', 'radius=100'),
    'highpass': ('apply_high_pass', 'radius=50'),
    'bandpass': ('apply_band_pass', 'inner=50 outer=150'),
    'vlines': ('remove_vertical_stripes', ''),
    'hlines': ('remove_horizontal_stripes', ''),
}


def print_usage():
    print("Usage: python main.py <image_path> [preset] [params...]")
    print("       python main.py --synthetic [preset] [params...]")
    print("\nPresets:")
    for name, (_, defaults) in PRESETS.items():
        print(f"  {name:<10} {defaults}")


def run_cli(args):
    """Load an image, apply an optional preset, write spectrum and reconstruction."""
    from engines.grayscale import rgba_to_luminance
    from engines.session import FrequencySession
    from utils.image_io import load_grid_image, save_image
    from utils.metrics import compute_psnr_ssim
    from utils.test_images import generate_striped_scene

    if not args or args[0] == '--help':
        print_usage()
        sys.exit(0)

    if args[0] == '--synthetic':
        print("Generating striped test image...")
        image = generate_striped_scene()
    else:
        print(f"Loading: {args[0]}")
        image = load_grid_image(args[0])

    session = FrequencySession()
    session.load_image(image)

    preset = args[1] if len(args) > 1 else None
    if preset is not None:
        if preset not in PRESETS:
            print(f"Unknown preset: {preset}")
            print_usage()
            sys.exit(1)
        method = getattr(session, PRESETS[preset][0])
        params = [float(p) for p in args[2:]]
        method(*params)
        print(f"Preset:    {preset} {' '.join(args[2:])}".rstrip())

    result = session.render()
    metrics = compute_psnr_ssim(rgba_to_luminance(image), result.reconstruction.magnitude)

    print("\n=== Results ===")
    print(f"Active:    {result.stats.active_percentage:.1f}%")
    print(f"Max (log): {result.stats.max_magnitude:.2f}")
    print(f"PSNR:      {metrics['psnr']:.2f} dB")
    print(f"SSIM:      {metrics['ssim']:.4f}")
    print(f"Time:      {result.render_time_ms:.2f} ms")

    save_image(result.spectrum_view.rgba, "spectrum.png")
    save_image(result.reconstruction.rgba, "reconstructed.png")
    print("\nSaved: spectrum.png, reconstructed.png")


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s"
    )
    run_cli(sys.argv[1:])


if __name__ == '__main__':
    main()
