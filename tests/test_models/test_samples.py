"""Tests for hit sample value objects."""

import pytest

from beatmapkit.models.samples import (
    BankHitSampleInfo,
    FileHitSampleInfo,
    HitSampleInfo,
    SampleBank,
    SequenceHitSampleInfo,
    TimedHitSampleInfo,
    clone_sample,
)


def test_lookup_names():
    sample = BankHitSampleInfo(name="hitnormal", bank=SampleBank.SOFT, custom_sample_bank=3)
    assert sample.lookup_names == ["soft-hitnormal3", "soft-hitnormal", "hitnormal"]


def test_clone_copies_value():
    sample = BankHitSampleInfo(name="hitclap", bank=SampleBank.DRUM, volume=40)
    clone = clone_sample(sample)
    assert clone == sample
    assert clone is not sample

    file_sample = FileHitSampleInfo(filename="x.ogg", volume=10)
    assert clone_sample(file_sample) == file_sample


def test_clone_rejects_unknown_type():
    with pytest.raises(TypeError):
        clone_sample(HitSampleInfo(volume=10))


def test_sequence_sample_at():
    a = TimedHitSampleInfo(0, BankHitSampleInfo(name="a"))
    b = TimedHitSampleInfo(1000, BankHitSampleInfo(name="b"))
    c = TimedHitSampleInfo(2000, BankHitSampleInfo(name="c"))
    seq = SequenceHitSampleInfo((a, b, c))

    assert seq.sample_at(-1) is None
    assert seq.sample_at(0) is a
    assert seq.sample_at(1500) is b
    assert seq.sample_at(1000) is b
    assert seq.sample_at(5000) is c
    assert SequenceHitSampleInfo().is_empty
