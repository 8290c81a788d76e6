"""
Procedural ambience for the catacombs.
Synthesises the looping drone at runtime with NumPy and plays it
through the pygame mixer.
"""

import numpy as np
import pygame

SAMPLE_RATE = 22050


def low_pass(signal, kernel_size):
    kernel = np.ones(kernel_size) / kernel_size
    return np.convolve(signal, kernel, mode="same")


def generate_catacomb_ambience(duration=8, seed=127):
    """Low droning wind with a slow swell, loops cleanly."""
    samples = int(SAMPLE_RATE * duration)
    t = np.linspace(0, duration, samples, False)
    rng = np.random.default_rng(seed)

    drone = 0.14 * np.sin(2 * np.pi * 55 * t)
    drone += 0.10 * np.sin(2 * np.pi * 41.25 * t)
    drone += 0.06 * np.sin(2 * np.pi * 110 * t)

    # wind through the tunnels
    wind = low_pass(rng.normal(0, 0.2, samples), kernel_size=120)
    swell = 0.5 + 0.5 * np.sin(2 * np.pi * t / duration)
    drone += wind * swell

    drone = drone / np.max(np.abs(drone)) * 0.6
    audio = np.array(drone * 32767, dtype=np.int16)
    stereo_audio = np.column_stack((audio, audio))

    return pygame.sndarray.make_sound(stereo_audio)


class AmbientAudio:
    """Looping ambience with the play / stop / volume controls areas use."""

    def __init__(self, sound):
        self.sound = sound
        self.is_playing = False
        self.volume = 1.0

    def play(self, loop=False):
        self.sound.play(loops=-1 if loop else 0)
        self.sound.set_volume(self.volume)
        self.is_playing = True

    def stop(self):
        self.sound.stop()
        self.is_playing = False

    def set_volume(self, volume):
        self.volume = max(0.0, min(1.0, volume))
        self.sound.set_volume(self.volume)


class SilentAudio:
    """Stand-in when no mixer is available: remembers state, plays nothing."""

    def __init__(self):
        self.is_playing = False
        self.volume = 1.0

    def play(self, loop=False):
        self.is_playing = True

    def stop(self):
        self.is_playing = False

    def set_volume(self, volume):
        self.volume = max(0.0, min(1.0, volume))


def make_ambient_audio():
    """AmbientAudio if the mixer opens, SilentAudio otherwise."""
    try:
        pygame.mixer.pre_init(SAMPLE_RATE, -16, 2, 512)
        pygame.mixer.init()
        return AmbientAudio(generate_catacomb_ambience())
    except pygame.error:
        return SilentAudio()
